"""Cosine basis of the 32-point DCT-II used by the perceptual hash.

``COS32[k][i] == cos(((i + 0.5) * k) * (pi / 32))`` as IEEE-754 doubles.
The values are pinned here instead of computed with ``math.cos`` because
platform math libraries differ in the last bit, and on upsampled images
such a difference is enough to flip a fingerprint bit.
"""

COS32 = (
    (
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
    ),
    (
        0.9987954562051724, 0.989176509964781, 0.970031253194544, 0.9415440651830208,
        0.9039892931234433, 0.8577286100002721, 0.8032075314806449, 0.7409511253549592,
        0.6715589548470184, 0.5956993044924335, 0.5141027441932217, 0.4275550934302822,
        0.33688985339222005, 0.24298017990326398, 0.14673047445536175, 0.049067674327418126,
        -0.04906767432741801, -0.14673047445536164, -0.24298017990326387, -0.33688985339221994,
        -0.42755509343028186, -0.5141027441932216, -0.5956993044924334, -0.6715589548470184,
        -0.7409511253549589, -0.8032075314806448, -0.857728610000272, -0.9039892931234433,
        -0.9415440651830207, -0.970031253194544, -0.989176509964781, -0.9987954562051724,
    ),
    (
        0.9951847266721969, 0.9569403357322088, 0.881921264348355, 0.773010453362737,
        0.6343932841636455, 0.4713967368259978, 0.29028467725446233, 0.09801714032956077,
        -0.09801714032956065, -0.29028467725446216, -0.4713967368259977, -0.6343932841636454,
        -0.773010453362737, -0.8819212643483549, -0.9569403357322088, -0.9951847266721968,
        -0.9951847266721969, -0.9569403357322089, -0.881921264348355, -0.7730104533627371,
        -0.6343932841636459, -0.4713967368259979, -0.29028467725446244, -0.09801714032956045,
        0.09801714032956009, 0.29028467725446205, 0.4713967368259976, 0.6343932841636456,
        0.7730104533627365, 0.8819212643483548, 0.9569403357322088, 0.9951847266721969,
    ),
    (
        0.989176509964781, 0.9039892931234433, 0.7409511253549592, 0.5141027441932217,
        0.24298017990326398, -0.04906767432741801, -0.33688985339221994, -0.5956993044924334,
        -0.8032075314806448, -0.9415440651830207, -0.9987954562051724, -0.970031253194544,
        -0.8577286100002721, -0.6715589548470187, -0.4275550934302825, -0.1467304744553623,
        0.14673047445536194, 0.42755509343028214, 0.6715589548470183, 0.857728610000272,
        0.970031253194544, 0.9987954562051724, 0.9415440651830209, 0.8032075314806453,
        0.5956993044924332, 0.33688985339222005, 0.049067674327418154, -0.2429801799032628,
        -0.5141027441932214, -0.7409511253549593, -0.9039892931234431, -0.989176509964781,
    ),
    (
        0.9807852804032304, 0.8314696123025452, 0.5555702330196023, 0.19509032201612833,
        -0.1950903220161282, -0.555570233019602, -0.8314696123025453, -0.9807852804032304,
        -0.9807852804032304, -0.8314696123025455, -0.5555702330196022, -0.19509032201612866,
        0.1950903220161283, 0.5555702330196018, 0.8314696123025452, 0.9807852804032303,
        0.9807852804032304, 0.8314696123025456, 0.5555702330196023, 0.19509032201612878,
        -0.1950903220161273, -0.5555702330196017, -0.8314696123025451, -0.9807852804032305,
        -0.9807852804032307, -0.8314696123025456, -0.5555702330196024, -0.19509032201612803,
        0.1950903220161272, 0.5555702330196016, 0.8314696123025451, 0.9807852804032304,
    ),
    (
        0.970031253194544, 0.7409511253549592, 0.33688985339222005, -0.14673047445536164,
        -0.5956993044924334, -0.9039892931234433, -0.9987954562051724, -0.8577286100002721,
        -0.5141027441932218, -0.04906767432741803, 0.42755509343028214, 0.803207531480645,
        0.9891765099647809, 0.9415440651830209, 0.6715589548470188, 0.24298017990326423,
        -0.2429801799032628, -0.6715589548470177, -0.9415440651830205, -0.9891765099647811,
        -0.8032075314806454, -0.4275550934302827, 0.04906767432741742, 0.5141027441932213,
        0.8577286100002719, 0.9987954562051724, 0.9039892931234434, 0.5956993044924335,
        0.1467304744553618, -0.3368898533922201, -0.7409511253549592, -0.9700312531945441,
    ),
    (
        0.9569403357322088, 0.6343932841636455, 0.09801714032956077, -0.4713967368259977,
        -0.8819212643483549, -0.9951847266721969, -0.7730104533627371, -0.29028467725446244,
        0.29028467725446205, 0.7730104533627365, 0.9951847266721969, 0.881921264348355,
        0.471396736825998, -0.09801714032955997, -0.6343932841636448, -0.9569403357322085,
        -0.9569403357322087, -0.6343932841636454, -0.09801714032956069, 0.47139673682599736,
        0.8819212643483547, 0.9951847266721969, 0.7730104533627377, 0.2902846772544636,
        -0.29028467725446255, -0.7730104533627369, -0.9951847266721968, -0.8819212643483562,
        -0.4713967368259983, 0.09801714032956137, 0.6343932841636445, 0.9569403357322089,
    ),
    (
        0.9415440651830208, 0.5141027441932217, -0.14673047445536164, -0.7409511253549589,
        -0.9987954562051724, -0.8032075314806449, -0.24298017990326412, 0.42755509343028214,
        0.9039892931234431, 0.9700312531945441, 0.5956993044924332, -0.04906767432741754,
        -0.6715589548470177, -0.989176509964781, -0.8577286100002723, -0.336889853392221,
        0.3368898533922202, 0.8577286100002719, 0.9891765099647811, 0.6715589548470182,
        0.0490676743274184, -0.5956993044924326, -0.9700312531945441, -0.9039892931234434,
        -0.4275550934302813, 0.24298017990326243, 0.8032075314806447, 0.9987954562051724,
        0.7409511253549601, 0.14673047445536205, -0.5141027441932225, -0.9415440651830203,
    ),
    (
        0.9238795325112867, 0.38268343236508984, -0.3826834323650897, -0.9238795325112867,
        -0.9238795325112868, -0.38268343236509034, 0.38268343236509, 0.9238795325112865,
        0.9238795325112867, 0.38268343236509045, -0.3826834323650899, -0.9238795325112864,
        -0.9238795325112867, -0.38268343236509056, 0.3826834323650898, 0.9238795325112864,
        0.9238795325112867, 0.38268343236509067, -0.38268343236508967, -0.9238795325112864,
        -0.9238795325112875, -0.3826834323650908, 0.38268343236508956, 0.923879532511287,
        0.9238795325112875, 0.3826834323650909, -0.38268343236508945, -0.923879532511287,
        -0.9238795325112876, -0.382683432365091, 0.38268343236508934, 0.923879532511287,
    ),
    (
        0.9039892931234433, 0.24298017990326398, -0.5956993044924334, -0.9987954562051724,
        -0.6715589548470187, 0.14673047445536194, 0.857728610000272, 0.9415440651830209,
        0.33688985339222005, -0.5141027441932214, -0.989176509964781, -0.7409511253549599,
        0.04906767432741742, 0.8032075314806448, 0.9700312531945443, 0.4275550934302828,
        -0.4275550934302818, -0.9700312531945441, -0.8032075314806455, -0.04906767432741852,
        0.7409511253549591, 0.9891765099647809, 0.5141027441932239, -0.33688985339221816,
        -0.9415440651830203, -0.8577286100002726, -0.14673047445536216, 0.6715589548470184,
        0.9987954562051724, 0.5956993044924352, -0.24298017990326207, -0.9039892931234428,
    ),
    (
        0.881921264348355, 0.09801714032956077, -0.773010453362737, -0.9569403357322089,
        -0.29028467725446244, 0.6343932841636456, 0.9951847266721969, 0.471396736825998,
        -0.4713967368259975, -0.9951847266721969, -0.6343932841636454, 0.29028467725446266,
        0.9569403357322085, 0.7730104533627377, -0.09801714032955972, -0.8819212643483547,
        -0.8819212643483562, -0.0980171403295627, 0.7730104533627358, 0.9569403357322094,
        0.2902846772544639, -0.6343932841636444, -0.995184726672197, -0.47139673682599853,
        0.4713967368259969, 0.9951847266721968, 0.6343932841636458, -0.2902846772544621,
        -0.9569403357322088, -0.7730104533627369, 0.09801714032956088, 0.8819212643483553,
    ),
    (
        0.8577286100002721, -0.04906767432741801, -0.9039892931234433, -0.8032075314806449,
        0.14673047445536194, 0.9415440651830208, 0.7409511253549592, -0.2429801799032628,
        -0.9700312531945441, -0.6715589548470182, 0.3368898533922202, 0.989176509964781,
        0.5956993044924335, -0.4275550934302818, -0.9987954562051724, -0.5141027441932238,
        0.5141027441932227, 0.9987954562051724, 0.4275550934302814, -0.5956993044924338,
        -0.9891765099647809, -0.33688985339221983, 0.6715589548470184, 0.970031253194544,
        0.2429801799032641, -0.7409511253549589, -0.9415440651830209, -0.14673047445536241,
        0.8032075314806444, 0.9039892931234438, 0.04906767432742268, -0.8577286100002696,
    ),
    (
        0.8314696123025452, -0.1950903220161282, -0.9807852804032304, -0.5555702330196022,
        0.5555702330196018, 0.9807852804032304, 0.19509032201612878, -0.8314696123025451,
        -0.8314696123025456, 0.1950903220161272, 0.9807852804032304, 0.5555702330196025,
        -0.5555702330196015, -0.9807852804032307, -0.19509032201613002, 0.831469612302544,
        0.8314696123025448, -0.19509032201612858, -0.9807852804032304, -0.5555702330196027,
        0.5555702330196013, 0.9807852804032308, 0.19509032201613036, -0.8314696123025438,
        -0.831469612302545, 0.19509032201612822, 0.9807852804032303, 0.5555702330196061,
        -0.555570233019601, -0.9807852804032302, -0.19509032201613072, 0.8314696123025456,
    ),
    (
        0.8032075314806449, -0.33688985339221994, -0.9987954562051724, -0.24298017990326412,
        0.857728610000272, 0.7409511253549592, -0.42755509343028203, -0.9891765099647811,
        -0.14673047445536166, 0.903989293123443, 0.6715589548470182, -0.5141027441932212,
        -0.9700312531945443, -0.04906767432741852, 0.9415440651830204, 0.595699304492435,
        -0.5956993044924338, -0.9415440651830209, 0.049067674327416926, 0.9700312531945435,
        0.5141027441932241, -0.6715589548470184, -0.9039892931234437, 0.1467304744553601,
        0.9891765099647806, 0.4275550934302851, -0.7409511253549563, -0.857728610000271,
        0.24298017990326515, 0.9987954562051724, 0.3368898533922204, -0.8032075314806442,
    ),
    (
        0.773010453362737, -0.4713967368259977, -0.9569403357322089, 0.09801714032956009,
        0.9951847266721969, 0.29028467725446255, -0.8819212643483548, -0.6343932841636454,
        0.6343932841636447, 0.8819212643483553, -0.29028467725446255, -0.9951847266721969,
        -0.0980171403295627, 0.9569403357322089, 0.4713967368259984, -0.7730104533627357,
        -0.7730104533627368, 0.4713967368259969, 0.9569403357322095, -0.09801714032956099,
        -0.9951847266721968, -0.2902846772544642, 0.8819212643483553, 0.634393284163646,
        -0.6343932841636468, -0.8819212643483565, 0.2902846772544618, 0.9951847266721967,
        0.09801714032956356, -0.9569403357322087, -0.47139673682599603, 0.7730104533627351,
    ),
    (
        0.7409511253549592, -0.5956993044924334, -0.8577286100002721, 0.42755509343028214,
        0.9415440651830209, -0.2429801799032628, -0.9891765099647811, 0.04906767432741742,
        0.9987954562051724, 0.1467304744553618, -0.9700312531945441, -0.33688985339221955,
        0.9039892931234429, 0.5141027441932239, -0.8032075314806446, -0.6715589548470199,
        0.6715589548470184, 0.8032075314806457, -0.5141027441932223, -0.9039892931234437,
        0.33688985339221783, 0.9700312531945441, -0.1467304744553635, -0.9987954562051724,
        -0.04906767432741925, 0.9891765099647806, 0.242980179903268, -0.9415440651830213,
        -0.4275550934302822, 0.8577286100002712, 0.5956993044924359, -0.740951125354956,
    ),
    (
        0.7071067811865476, -0.7071067811865475, -0.7071067811865477, 0.7071067811865474,
        0.7071067811865477, -0.7071067811865467, -0.7071067811865471, 0.7071067811865466,
        0.7071067811865472, -0.7071067811865465, -0.7071067811865474, 0.7071067811865465,
        0.7071067811865475, -0.7071067811865464, -0.7071067811865476, 0.7071067811865462,
        0.7071067811865476, -0.7071067811865461, -0.7071067811865477, 0.707106781186546,
        0.7071067811865503, -0.707106781186546, -0.7071067811865479, 0.7071067811865483,
        0.7071067811865505, -0.7071067811865458, -0.707106781186548, 0.7071067811865482,
        0.7071067811865507, -0.7071067811865457, -0.7071067811865482, 0.7071067811865481,
    ),
    (
        0.6715589548470184, -0.8032075314806448, -0.5141027441932218, 0.9039892931234431,
        0.33688985339222005, -0.9700312531945441, -0.14673047445536166, 0.9987954562051724,
        -0.04906767432741729, -0.9891765099647811, 0.24298017990326243, 0.9415440651830208,
        -0.42755509343028003, -0.8577286100002726, 0.5956993044924337, 0.7409511253549602,
        -0.7409511253549589, -0.5956993044924354, 0.8577286100002715, 0.4275550934302851,
        -0.9415440651830214, -0.24298017990326443, 0.9891765099647806, 0.04906767432742292,
        -0.9987954562051724, 0.1467304744553596, 0.9700312531945451, -0.3368898533922206,
        -0.903989293123444, 0.5141027441932186, 0.8032075314806442, -0.6715589548470177,
    ),
    (
        0.6343932841636455, -0.8819212643483549, -0.29028467725446244, 0.9951847266721969,
        -0.09801714032955997, -0.9569403357322087, 0.47139673682599736, 0.7730104533627377,
        -0.7730104533627369, -0.4713967368259983, 0.9569403357322089, 0.09801714032956282,
        -0.995184726672197, 0.2902846772544622, 0.8819212643483563, -0.6343932841636443,
        -0.6343932841636459, 0.8819212643483553, 0.29028467725446433, -0.9951847266721968,
        0.09801714032956063, 0.9569403357322086, -0.47139673682599326, -0.7730104533627394,
        0.7730104533627351, 0.4713967368259993, -0.9569403357322086, -0.09801714032956038,
        0.9951847266721968, -0.2902846772544578, -0.8819212643483568, 0.6343932841636434,
    ),
    (
        0.5956993044924335, -0.9415440651830207, -0.04906767432741803, 0.9700312531945441,
        -0.5141027441932214, -0.6715589548470182, 0.903989293123443, 0.1467304744553618,
        -0.9891765099647811, 0.4275550934302801, 0.7409511253549601, -0.8577286100002717,
        -0.24298017990326395, 0.9987954562051724, -0.33688985339221794, -0.8032075314806458,
        0.8032075314806444, 0.33688985339222016, -0.9987954562051723, 0.24298017990326515,
        0.8577286100002729, -0.7409511253549561, -0.4275550934302822, 0.9891765099647806,
        -0.146730474455363, -0.903989293123444, 0.6715589548470151, 0.5141027441932219,
        -0.9700312531945433, 0.04906767432741926, 0.9415440651830214, -0.5956993044924298,
    ),
    (
        0.5555702330196023, -0.9807852804032304, 0.1950903220161283, 0.8314696123025456,
        -0.8314696123025451, -0.19509032201612803, 0.9807852804032307, -0.5555702330196015,
        -0.5555702330196026, 0.9807852804032304, -0.19509032201612858, -0.8314696123025449,
        0.8314696123025438, 0.19509032201613036, -0.9807852804032308, 0.5555702330196011,
        0.5555702330196061, -0.9807852804032297, 0.19509032201612447, 0.8314696123025471,
        -0.8314696123025435, -0.19509032201613097, 0.9807852804032309, -0.5555702330196005,
        -0.5555702330196036, 0.9807852804032302, -0.19509032201612736, -0.8314696123025456,
        0.8314696123025451, 0.19509032201612808, -0.9807852804032303, 0.555570233019603,
    ),
    (
        0.5141027441932217, -0.9987954562051724, 0.42755509343028214, 0.5956993044924332,
        -0.989176509964781, 0.3368898533922202, 0.6715589548470182, -0.9700312531945441,
        0.24298017990326243, 0.7409511253549601, -0.9415440651830203, 0.14673047445536033,
        0.8032075314806457, -0.9039892931234428, 0.04906767432741668, 0.8577286100002728,
        -0.8577286100002696, -0.04906767432741925, 0.9039892931234453, -0.8032075314806442,
        -0.1467304744553664, 0.9415440651830211, -0.740951125354956, -0.24298017990326493,
        0.9700312531945451, -0.6715589548470177, -0.3368898533922243, 0.9891765099647811,
        -0.5956993044924298, -0.42755509343028286, 0.9987954562051726, -0.5141027441932149,
    ),
    (
        0.4713967368259978, -0.9951847266721969, 0.6343932841636456, 0.29028467725446255,
        -0.9569403357322087, 0.773010453362737, 0.09801714032956081, -0.8819212643483562,
        0.8819212643483555, -0.09801714032956124, -0.7730104533627368, 0.9569403357322088,
        -0.2902846772544621, -0.6343932841636459, 0.9951847266721968, -0.4713967368259935,
        -0.47139673682599587, 0.9951847266721967, -0.6343932841636466, -0.2902846772544613,
        0.9569403357322086, -0.7730104533627373, -0.09801714032956038, 0.881921264348355,
        -0.8819212643483548, 0.0980171403295599, 0.7730104533627375, -0.9569403357322085,
        0.29028467725446083, 0.634393284163647, -0.9951847266721959, 0.47139673682598915,
    ),
    (
        0.4275550934302822, -0.970031253194544, 0.803207531480645, -0.04906767432741754,
        -0.7409511253549599, 0.989176509964781, -0.5141027441932212, -0.33688985339221955,
        0.9415440651830208, -0.8577286100002717, 0.14673047445536033, 0.67155895484702,
        -0.9987954562051723, 0.5956993044924335, 0.24298017990326776, -0.9039892931234438,
        0.9039892931234441, -0.2429801799032616, -0.5956993044924329, 0.9987954562051726,
        -0.6715589548470179, -0.14673047445536663, 0.8577286100002731, -0.941544065183021,
        0.33688985339221694, 0.5141027441932221, -0.9891765099647817, 0.7409511253549579,
        0.04906767432741681, -0.8032075314806467, 0.9700312531945422, -0.42755509343028464,
    ),
    (
        0.38268343236508984, -0.9238795325112868, 0.9238795325112865, -0.3826834323650899,
        -0.38268343236509056, 0.9238795325112867, -0.9238795325112864, 0.38268343236508956,
        0.3826834323650909, -0.9238795325112876, 0.923879532511287, -0.3826834323650892,
        -0.3826834323650912, 0.9238795325112877, -0.9238795325112854, 0.38268343236508556,
        0.3826834323650883, -0.9238795325112865, 0.9238795325112866, -0.3826834323650885,
        -0.38268343236509195, 0.9238795325112881, -0.9238795325112851, 0.3826834323650849,
        0.382683432365089, -0.9238795325112868, 0.9238795325112863, -0.3826834323650813,
        -0.3826834323650926, 0.9238795325112856, -0.9238795325112849, 0.3826834323650908,
    ),
    (
        0.33688985339222005, -0.8577286100002721, 0.9891765099647809, -0.6715589548470177,
        0.04906767432741742, 0.5956993044924335, -0.9700312531945443, 0.9039892931234429,
        -0.42755509343028003, -0.24298017990326395, 0.8032075314806457, -0.9987954562051723,
        0.7409511253549588, -0.1467304744553635, -0.5141027441932244, 0.941544065183021,
        -0.9415440651830213, 0.5141027441932187, 0.146730474455363, -0.7409511253549584,
        0.9987954562051726, -0.8032075314806439, 0.24298017990326445, 0.42755509343028597,
        -0.9039892931234442, 0.9700312531945441, -0.5956993044924352, -0.04906767432742757,
        0.6715589548470239, -0.9891765099647817, 0.8577286100002706, -0.33688985339221944,
    ),
    (
        0.29028467725446233, -0.7730104533627371, 0.9951847266721969, -0.8819212643483548,
        0.47139673682599736, 0.09801714032956081, -0.6343932841636456, 0.9569403357322094,
        -0.9569403357322089, 0.6343932841636444, -0.09801714032956099, -0.47139673682599875,
        0.8819212643483564, -0.9951847266721968, 0.7730104533627352, -0.2902846772544582,
        -0.2902846772544613, 0.7730104533627373, -0.9951847266721972, 0.8819212643483533,
        -0.4713967368259928, -0.09801714032956063, 0.6343932841636468, -0.9569403357322098,
        0.9569403357322074, -0.6343932841636404, 0.09801714032955235, 0.4713967368259939,
        -0.8819212643483538, 0.9951847266721969, -0.7730104533627365, 0.2902846772544601,
    ),
    (
        0.24298017990326398, -0.6715589548470187, 0.9415440651830209, -0.989176509964781,
        0.8032075314806448, -0.4275550934302818, -0.04906767432741852, 0.5141027441932239,
        -0.8577286100002726, 0.9987954562051724, -0.9039892931234428, 0.5956993044924335,
        -0.1467304744553635, -0.3368898533922236, 0.7409511253549605, -0.9700312531945442,
        0.9700312531945442, -0.740951125354956, 0.33688985339221716, 0.14673047445536325,
        -0.5956993044924332, 0.9039892931234457, -0.9987954562051722, 0.8577286100002709,
        -0.5141027441932149, 0.049067674327418764, 0.4275550934302864, -0.8032075314806426,
        0.9891765099647812, -0.9415440651830184, 0.6715589548470194, -0.24298017990325993,
    ),
    (
        0.19509032201612833, -0.5555702330196022, 0.8314696123025456, -0.9807852804032307,
        0.9807852804032304, -0.831469612302545, 0.5555702330196015, -0.19509032201612858,
        -0.19509032201613025, 0.5555702330196028, -0.831469612302545, 0.9807852804032309,
        -0.9807852804032297, 0.8314696123025456, -0.5555702330196007, 0.19509032201612425,
        0.1950903220161276, -0.5555702330196036, 0.8314696123025475, -0.9807852804032303,
        0.9807852804032302, -0.8314696123025431, 0.555570233019603, -0.1950903220161269,
        -0.19509032201612497, 0.5555702330196073, -0.8314696123025459, 0.9807852804032298,
        -0.9807852804032293, 0.8314696123025446, -0.5555702330196053, 0.19509032201612256,
    ),
    (
        0.14673047445536175, -0.4275550934302825, 0.6715589548470188, -0.8577286100002723,
        0.9700312531945443, -0.9987954562051724, 0.9415440651830204, -0.8032075314806446,
        0.5956993044924337, -0.33688985339221794, 0.04906767432741668, 0.24298017990326776,
        -0.5141027441932244, 0.7409511253549605, -0.9039892931234439, 0.989176509964781,
        -0.989176509964781, 0.9039892931234439, -0.7409511253549558, 0.5141027441932183,
        -0.24298017990326087, -0.04906767432742023, 0.33688985339222133, -0.5956993044924337,
        0.8032075314806446, -0.9415440651830204, 0.9987954562051723, -0.9700312531945448,
        0.8577286100002668, -0.6715589548470114, 0.4275550934302745, -0.14673047445535428,
    ),
    (
        0.09801714032956077, -0.29028467725446244, 0.471396736825998, -0.6343932841636454,
        0.7730104533627377, -0.8819212643483562, 0.9569403357322094, -0.995184726672197,
        0.9951847266721968, -0.9569403357322088, 0.8819212643483553, -0.7730104533627375,
        0.6343932841636439, -0.47139673682599326, 0.2902846772544615, -0.09801714032955673,
        -0.09801714032956038, 0.29028467725446505, -0.4713967368259965, 0.6343932841636468,
        -0.77301045336274, 0.8819212643483553, -0.9569403357322078, 0.9951847266721968,
        -0.9951847266721966, 0.9569403357322073, -0.881921264348351, 0.7730104533627387,
        -0.6343932841636453, 0.47139673682599476, -0.29028467725445634, 0.09801714032955137,
    ),
    (
        0.049067674327418126, -0.1467304744553623, 0.24298017990326423, -0.336889853392221,
        0.4275550934302828, -0.5141027441932238, 0.595699304492435, -0.6715589548470199,
        0.7409511253549602, -0.8032075314806458, 0.8577286100002728, -0.9039892931234438,
        0.941544065183021, -0.9700312531945442, 0.989176509964781, -0.9987954562051724,
        0.9987954562051724, -0.989176509964781, 0.9700312531945441, -0.941544065183021,
        0.9039892931234437, -0.8577286100002727, 0.8032075314806414, -0.7409511253549601,
        0.6715589548470144, -0.5956993044924349, 0.5141027441932174, -0.4275550934302842,
        0.3368898533922158, -0.2429801799032666, 0.14673047445535767, -0.049067674327421214,
    ),
)
