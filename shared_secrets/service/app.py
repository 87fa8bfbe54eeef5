"""Share service FastAPI application.

Exposes the sharing protocol over HTTP for callers that cannot link the
library directly.  Secrets travel hex-encoded; shares are the same radix-36
``(x, y)`` strings the share file stores.

Endpoints:
- POST /split    – split a secret into n shares with threshold k
- POST /recover  – recover a secret from shares
- GET  /health

Run with any ASGI server, e.g. ``uvicorn shared_secrets.service.app:app``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator, model_validator

from shared_secrets.config import MAX_SHARES
from shared_secrets.crypto.shamir import recover_secret, split_secret
from shared_secrets.logging import configure_logging

log = structlog.get_logger(__name__)

# ------ request / response models ------


class ShareModel(BaseModel):
    x: str
    y: str


class SplitRequest(BaseModel):
    secret_hex: str
    n: int = Field(gt=2)
    k: int = Field(gt=0)

    @field_validator("secret_hex")
    @classmethod
    def _validate_hex(cls, value: str) -> str:
        bytes.fromhex(value)  # raises ValueError -> 422
        return value

    @model_validator(mode="after")
    def _check_threshold(self) -> "SplitRequest":
        if self.k > self.n:
            raise ValueError(f"k must not exceed n (k={self.k}, n={self.n})")
        return self


class SplitResponse(BaseModel):
    shares: List[ShareModel]


class RecoverRequest(BaseModel):
    shares: List[ShareModel]
    length: Optional[int] = Field(default=None, ge=0)


class RecoverResponse(BaseModel):
    secret_hex: str


class ServiceSettings:
    """Per-app limits."""

    def __init__(self, max_shares: int = MAX_SHARES) -> None:
        self.max_shares = max_shares


def create_app(settings: ServiceSettings | None = None) -> FastAPI:
    """Factory that creates a share service app."""
    if settings is None:
        settings = ServiceSettings()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        configure_logging()
        yield

    app = FastAPI(title="Shared Secrets Share Service", lifespan=lifespan)

    @app.post("/split", response_model=SplitResponse)
    async def split(req: SplitRequest):
        if req.n > settings.max_shares:
            raise HTTPException(422, f"n must not exceed {settings.max_shares}")
        try:
            shares = split_secret(bytes.fromhex(req.secret_hex), req.n, req.k)
        except ValueError as exc:
            raise HTTPException(400, str(exc))
        log.info("split request served", n=req.n, k=req.k)
        return SplitResponse(shares=[ShareModel(x=x, y=y) for x, y in shares])

    @app.post("/recover", response_model=RecoverResponse)
    async def recover(req: RecoverRequest):
        if len(req.shares) > settings.max_shares:
            raise HTTPException(422, f"At most {settings.max_shares} shares are accepted")
        try:
            secret = recover_secret(((s.x, s.y) for s in req.shares), length=req.length)
        except ValueError as exc:
            log.warning("recover request rejected", shares=len(req.shares), error=str(exc))
            raise HTTPException(400, str(exc))
        log.info("recover request served", shares=len(req.shares))
        return RecoverResponse(secret_hex=secret.hex())

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
