"""Utility functions for Toon API Client."""

import math
import os
import re
from typing import Any, Dict, Mapping

from .const import STATE_LABELS

SENSITIVE_KEYS = frozenset(
    {"password", "passwordHash", "clientId", "clientIdChecksum", "agreementIdChecksum", "random"}
)

_KEYS = "|".join(sorted(SENSITIVE_KEYS, key=len, reverse=True))

# "key": "value" with escaped quotes allowed inside the value
_JSON_STRING_PATTERN = re.compile(rf'"({_KEYS})"(\s*:\s*)"(?:[^"\\]|\\.)*"')
# "key": 123
_JSON_NUMBER_PATTERN = re.compile(rf'"({_KEYS})"(\s*:\s*)-?[0-9][0-9.eE+-]*')
# key=value in a query string
_QUERY_PATTERN = re.compile(rf"(?<![A-Za-z])({_KEYS})=[^&\s]*")


def generate_nonce() -> str:
    """Return a random version 4 UUID string used as the session nonce.

    Reads 16 bytes from the OS secure random source, forces the version
    nibble (byte 6) to 4 and the variant bits (byte 8) to 10, and formats
    the result as lowercase 8-4-4-4-12 hex groups. Errors from the random
    source propagate to the caller.
    """
    raw = bytearray(os.urandom(16))
    if len(raw) != 16:
        raise OSError("Random source returned too few bytes")

    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80

    h = raw.hex()
    return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


def encode_temperature(degrees: float) -> int:
    """Convert degrees to integer hundredths, truncating extra precision.

    The product is rounded to 6 decimals first so binary float noise
    (20.15 * 100 == 2014.999...) does not lose a hundredth.
    """
    if not math.isfinite(degrees):
        raise ValueError(f"Temperature must be a finite number, got {degrees!r}")
    return int(round(degrees * 100, 6))


def decode_temperature(hundredths: int) -> float:
    """Convert integer hundredths back to degrees."""
    return hundredths / 100.0


def lookup_state(state: int) -> str:
    """Map an activeState code to its label, empty for unknown codes."""
    return STATE_LABELS.get(state, "")


def mask_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of query parameters with sensitive values replaced."""
    return {key: "***" if key in SENSITIVE_KEYS else value for key, value in params.items()}


def mask_pii(text: str) -> str:
    """Mask passwords, client ids, checksums and nonces in a URL or JSON string.

    Quoted JSON values are masked up to their closing quote. Query string
    values are masked up to the next ``&``, so unencoded parameter values
    should go through :func:`mask_params` instead.
    """
    if not text:
        return text
    text = _JSON_STRING_PATTERN.sub(r'"\1"\2"***"', text)
    text = _JSON_NUMBER_PATTERN.sub(r'"\1"\2"***"', text)
    return _QUERY_PATTERN.sub(r"\1=***", text)
