"""Minimal Python SDK for the KYC verification HTTP API."""

from .client import DEFAULT_BASE_URL, FALLBACK_MESSAGE, KYCClient
from .models import KYCRequest, KYCResponse

__all__ = ["DEFAULT_BASE_URL", "FALLBACK_MESSAGE", "KYCClient", "KYCRequest", "KYCResponse"]
