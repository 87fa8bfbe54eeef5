"""HTTP client for the share service."""

from __future__ import annotations

from typing import Iterable, Optional, Set

import httpx

from shared_secrets.crypto.shamir import Share


class ShareServiceClient:
    """Thin wrapper over ``httpx.Client``.

    Non-2xx responses raise ``httpx.HTTPStatusError``.  Any preconfigured
    ``httpx.Client`` (e.g. FastAPI's ``TestClient``) can be passed in.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = client if client is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def split(self, secret: bytes, n: int, k: int) -> Set[Share]:
        resp = self._client.post("/split", json={"secret_hex": secret.hex(), "n": n, "k": k})
        resp.raise_for_status()
        return {(s["x"], s["y"]) for s in resp.json()["shares"]}

    def recover(self, shares: Iterable[Share], length: Optional[int] = None) -> bytes:
        payload = {"shares": [{"x": x, "y": y} for x, y in shares], "length": length}
        resp = self._client.post("/recover", json=payload)
        resp.raise_for_status()
        return bytes.fromhex(resp.json()["secret_hex"])

    def health(self) -> bool:
        resp = self._client.get("/health")
        return resp.status_code == 200 and resp.json().get("status") == "ok"

    def close(self) -> None:
        self._client.close()
