"""
Byte decoding for uploads.

Rules:
- The whole pipeline uses ONE single-byte encoding (input decode and output encode).
- Detection via charset-normalizer is diagnostic only: it never changes the decode.
- A UTF-8 looking upload gets a warning, since its accented characters arrive
  as two single-byte characters and are not normalized.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

_UTF8_NAMES = ("utf_8", "utf8", "utf_8_sig")


def detect_encoding(raw: bytes) -> str | None:
    if not raw:
        return None
    match = from_bytes(raw).best()
    return match.encoding if match is not None else None


def decode_upload(raw: bytes, encoding: str) -> Tuple[str, Dict[str, Any]]:
    warnings: List[str] = []
    detected = detect_encoding(raw)

    text = raw.decode(encoding, errors="replace")
    replaced = "�" in text
    if replaced:
        warnings.append(f"bytes not defined in {encoding} were replaced")

    if detected is not None and detected.lower().replace("-", "_") in _UTF8_NAMES and not raw.isascii():
        warnings.append(f"input looks like {detected} but is decoded as {encoding}")

    for w in warnings:
        logger.warning(w)

    report = {
        "detected": detected,
        "decode_used": encoding,
        "output": encoding,
        "replaced_bytes": replaced,
        "warnings": warnings,
    }
    return text, report


def encode_output(text: str, encoding: str) -> bytes:
    return text.encode(encoding, errors="replace")
