#!/usr/bin/env python3
"""KYC quickstart: read ID image + selfie -> submit -> print verdict."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

from swan_kyc import DEFAULT_BASE_URL, KYCClient, KYCRequest, KYCResponse


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Submit a KYC verification request")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--email", required=True)
    parser.add_argument("--id-image", required=True, help="Path to the ID document image")
    parser.add_argument("--selfie", required=True, help="Path to the selfie image")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


async def submit(base_url: str, request: KYCRequest) -> KYCResponse:
    async with KYCClient(base_url=base_url) as client:
        return await client.submit_kyc(request)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = KYCRequest.from_paths(args.email, args.id_image, args.selfie)
    except OSError as exc:
        print(f"[FAIL] could not read input image: {exc}")
        return 2

    result = asyncio.run(submit(args.base_url, request))
    if not isinstance(result, dict) or not result.get("success"):
        message = result.get("message") if isinstance(result, dict) else None
        print(f"[FAIL] KYC submission: {message or 'unexpected response'}")
        if isinstance(result, dict) and result.get("data") is not None:
            print(result["data"])
        return 2

    print("[OK] /kyc", args.email)
    print("Success:", result.get("success"))
    print("Verified:", result.get("verified"))
    print("Similarity:", result.get("similarity"))
    if result.get("message"):
        print("Message:", result["message"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
