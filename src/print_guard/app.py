"""This module contains the FastAPI application for the Print Guard service.

It defines the API endpoints for moderating classifier output, fingerprinting
uploaded images and inspecting the resolved thresholds, as well as health and
version checks. It also handles the application startup logic, including
loading the list of known fingerprints.
"""
from __future__ import annotations
import os
import json
import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, File, UploadFile, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field
from prometheus_client import make_asgi_app

from .guard import ImageGuard, DEFAULT_CONFIG, ALLOWED_IMAGE_CT, log_entry
from .phash import InvalidInputError

PROMETHEUS_ENABLED = os.getenv("PROMETHEUS_ENABLED", "0") == "1"
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", "10000000"))
DECISION_LOG_PATH = os.getenv("DECISION_LOG_PATH")
VERSION = "1.0.0"

logger = logging.getLogger(__name__)

app = FastAPI(title="Print Guard API")
app.state.guard = ImageGuard(DEFAULT_CONFIG.copy())
app.state.max_upload_size = MAX_UPLOAD_BYTES

if PROMETHEUS_ENABLED:
    app.mount("/metrics", make_asgi_app())


@app.on_event("startup")
async def startup_event():
    """Initializes the ImageGuard instance at application startup."""
    # Allow reading known hashes from file path if provided
    hash_path = os.getenv("HASH_LIST_PATH")
    conf = DEFAULT_CONFIG.copy()
    if hash_path and os.path.exists(hash_path):
        try:
            with open(hash_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict) and "known_phashes" in data:
                conf["known_phashes"] = data["known_phashes"]
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load known hashes from {hash_path}: {e}")
    app.state.guard = ImageGuard(conf)


class ModerationRequest(BaseModel):
    """The request model for the /moderate endpoint."""

    labels: List[str] = Field(default_factory=list)
    scores: Dict[str, float] = Field(default_factory=dict)
    overrides: Dict[str, Any] = Field(default_factory=dict)
    phash: Optional[str] = None
    verbose: bool = False
    # Raw provider scan; used instead of labels/scores when present.
    categories: Optional[Dict[str, Any]] = None
    category_scores: Optional[Dict[str, Any]] = None
    provider_error: bool = False
    # Upload metadata for the text gate.
    filename: Optional[str] = None
    design_name: Optional[str] = None
    text_hints: Optional[Union[str, List[str]]] = None


@app.get("/health")
def health():
    """Returns the health status of the service."""
    return {"status": "ok"}


@app.get("/version")
def version():
    """Returns the version of the service."""
    return {"version": VERSION}


@app.get("/thresholds")
def thresholds():
    """Returns the thresholds currently in effect."""
    return app.state.guard.thresholds().to_dict()


@app.post("/moderate")
def moderate(req: ModerationRequest):
    """Decides whether an image may be printed, given its classifier output."""
    guard = app.state.guard
    gate = {
        "filename": req.filename,
        "design_name": req.design_name,
        "text_hints": req.text_hints,
    }
    try:
        if req.categories is not None or req.category_scores is not None or req.provider_error:
            verdict = guard.moderate_scan(
                req.categories,
                req.category_scores,
                req.overrides,
                provider_failed=req.provider_error,
                verbose=req.verbose,
                **gate,
            )
        else:
            verdict = guard.moderate(
                req.labels, req.scores, req.overrides, verbose=req.verbose, **gate
            )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    log_entry(
        datetime.now(timezone.utc).isoformat(),
        uuid.uuid4().hex,
        verdict,
        req.phash,
        DECISION_LOG_PATH,
        logger,
    )
    return verdict.to_dict()


@app.post("/fingerprint")
async def fingerprint_endpoint(request: Request, file: UploadFile = File(...)):
    """Computes the perceptual hash of an image and checks it for duplicates."""
    if file.content_type not in ALLOWED_IMAGE_CT:
        raise HTTPException(status_code=415, detail="Unsupported media type")
    cl = request.headers.get("content-length")
    if cl is not None and cl.isdigit() and int(cl) > app.state.max_upload_size:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")
    cap = app.state.max_upload_size + 1
    content = await file.read(cap)
    if len(content) > app.state.max_upload_size:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")
    try:
        result = await run_in_threadpool(app.state.guard.assess_image, content)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "phash": result.phash,
        "min_distance": result.min_distance,
        "duplicate": result.duplicate,
    }
