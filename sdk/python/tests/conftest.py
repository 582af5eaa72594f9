from __future__ import annotations

import sys
from pathlib import Path

import pytest


SDK_DIR = Path(__file__).resolve().parents[1]
if str(SDK_DIR) not in sys.path:
    sys.path.insert(0, str(SDK_DIR))


@pytest.fixture
def id_image_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0fake-passport-jpeg"


@pytest.fixture
def selfie_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0fake-selfie-jpeg"


@pytest.fixture
def image_paths(tmp_path: Path, id_image_bytes: bytes, selfie_bytes: bytes) -> tuple:
    id_path = tmp_path / "passport.jpeg"
    selfie_path = tmp_path / "selfile.jpeg"
    id_path.write_bytes(id_image_bytes)
    selfie_path.write_bytes(selfie_bytes)
    return id_path, selfie_path
