from __future__ import annotations

import base64
import mimetypes
import os
from pathlib import Path
from typing import Any, Mapping, Union

IMAGE_MIMETYPE = "image/jpeg"
VIDEO_MIMETYPE = "video/mp4"
VOICE_MIMETYPE = "audio/ogg; codecs=opus"
FILE_MIMETYPE = "application/octet-stream"

FileInput = Union[str, os.PathLike, Mapping[str, Any]]


def encode_file(path: str | os.PathLike[str]) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def file_payload(file: FileInput, default_mimetype: str, *, force_mimetype: bool = False) -> Any:
    """Return the gateway's ``{mimetype, filename, data}`` payload for ``file``.

    Mappings (already built payloads, or ``{"url": ...}`` references) are
    passed through untouched. Paths are read and base64 encoded; the MIME
    type is guessed from the file name unless ``force_mimetype`` is set.
    """
    if isinstance(file, Mapping):
        return dict(file)
    path = Path(file)
    mimetype = default_mimetype
    if not force_mimetype:
        guessed, _ = mimetypes.guess_type(path.name)
        mimetype = guessed or default_mimetype
    return {
        "mimetype": mimetype,
        "filename": path.name,
        "data": encode_file(path),
    }
