import base64
import binascii
import os
from typing import Optional, Tuple

_CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
}


def content_type_for(filename: str) -> str:
    """Guess an image content type from the file extension."""
    ext = os.path.splitext(filename or "")[1].lower()
    return _CONTENT_TYPES.get(ext, "application/octet-stream")


def split_data_url(value: str) -> Tuple[str, Optional[str]]:
    """Accept either raw base64 or a ``data:<type>;base64,<payload>`` URL.

    Returns the bare payload and the content type found in the URL, if any.
    """
    if value.startswith("data:") and "," in value:
        header, payload = value.split(",", 1)
        ct = header[5:].split(";")[0].strip() or None
        return payload, ct
    return value, None


def decode_image(value: str) -> Tuple[bytes, Optional[str]]:
    payload, ct = split_data_url(value.strip())
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Image must be valid base64 data")
    return data, ct


def encode_image(data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def apply_image(target, value: Optional[str], content_type: Optional[str],
                data_attr: str = "image_data", type_attr: str = "image_content_type") -> None:
    """Write an incoming base64 image onto ``target``.

    ``None`` leaves the current image alone, an empty string clears it.
    """
    if value is None:
        return
    if value == "":
        setattr(target, data_attr, None)
        setattr(target, type_attr, None)
        return
    data, url_ct = decode_image(value)
    setattr(target, data_attr, data)
    setattr(target, type_attr, content_type or url_ct or "application/octet-stream")
