"""Request/response shapes for the KYC verification API."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Tuple, TypedDict, Union

FileContent = Union[bytes, IO[bytes]]


class KYCResponse(TypedDict, total=False):
    """Body returned by the KYC service.

    Passed through verbatim; keys are declared for type-checkers only.
    """

    success: bool
    message: str
    data: Any
    verified: bool
    similarity: float
    error: str


@dataclass
class KYCRequest:
    email: str
    id_image: FileContent
    # sent as the "selfile" part
    sefile: FileContent

    @classmethod
    def from_paths(cls, email: str, id_image_path: Union[str, Path], selfie_path: Union[str, Path]) -> "KYCRequest":
        return cls(
            email=email,
            id_image=Path(id_image_path).expanduser().read_bytes(),
            sefile=Path(selfie_path).expanduser().read_bytes(),
        )


def file_part(content: FileContent, default_name: str) -> Tuple[str, FileContent]:
    name = getattr(content, "name", None)
    if isinstance(name, str) and name:
        return Path(name).name, content
    return default_name, content
