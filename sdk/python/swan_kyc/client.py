"""Async HTTP client for the KYC verification service."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, cast

import httpx

from .models import KYCRequest, KYCResponse, file_part

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://aws-kyc-verification.onrender.com"
FALLBACK_MESSAGE = "KYC submission failed"
KYC_PATH = "/kyc"


class KYCClient:
    """Thin client over the remote ``POST /kyc`` endpoint.

    ``submit_kyc`` never raises: transport failures and non-2xx replies are
    folded into a ``{"success": False, ...}`` response.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    async def __aenter__(self) -> "KYCClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _decode_body(self, response: httpx.Response) -> Any:
        text = response.text
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text

    def _form(self, payload: KYCRequest) -> Dict[str, Any]:
        return {
            "data": {"email": payload.email},
            "files": {
                "id_image": file_part(payload.id_image, "id_image.jpeg"),
                "selfile": file_part(payload.sefile, "selfie.jpeg"),
            },
        }

    def _failure(self, body: Any) -> KYCResponse:
        message = body.get("message") if isinstance(body, dict) else None
        return {
            "success": False,
            "message": message or FALLBACK_MESSAGE,
            "data": body,
        }

    async def submit_kyc(self, payload: KYCRequest) -> KYCResponse:
        logger.debug("Submitting KYC for %s to %s%s", payload.email, self.base_url, KYC_PATH)
        if self._http.is_closed:
            logger.warning("KYC submission failed: client is closed")
            return self._failure(None)
        try:
            response = await self._http.post(KYC_PATH, **self._form(payload))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("KYC submission rejected: HTTP %s", exc.response.status_code)
            return self._failure(self._decode_body(exc.response))
        except (httpx.HTTPError, httpx.StreamError, httpx.InvalidURL, OSError) as exc:
            logger.warning("KYC submission failed: %s", exc)
            return self._failure(None)

        return cast(KYCResponse, self._decode_body(response))
