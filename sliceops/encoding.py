"""Encoding flat sequences of numbers and strings as JSON arrays."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional

_EXPONENT_PADDING = re.compile(r"e-0(\d)$")

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"unsupported value: {value!r}")
    text = repr(value)
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        return _EXPONENT_PADDING.sub(r"e-\1", text)
    fixed = format(Decimal(text), "f")
    if "." in fixed:
        fixed = fixed.rstrip("0").rstrip(".")
    return fixed


def _encode_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    code = ord(ch)
    if code < 0x20:
        return f"\\u{code:04x}"
    if 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return ch


def _encode_string(value: str) -> str:
    return '"' + "".join(_encode_char(ch) for ch in value) + '"'


def _encode_element(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _encode_float(value)
    if isinstance(value, str):
        return _encode_string(value)
    raise TypeError(
        f"cannot encode {type(value).__name__} as a JSON array element"
    )


def _encoded(ss: Optional[Iterable[Any]]) -> list[str]:
    return [_encode_element(value) for value in (ss if ss is not None else ())]


def json_string_indent(
    ss: Optional[Iterable[Any]], prefix: str, indent: str
) -> str:
    """Return the elements as an indented JSON array string.

    Every line after the first starts with ``prefix``; elements are further
    indented by ``indent``. None and empty input both give ``[]``.
    """
    parts = _encoded(ss)
    if not parts:
        return "[]"
    inner = ",".join(f"\n{prefix}{indent}{part}" for part in parts)
    return f"[{inner}\n{prefix}]"


def json_bytes_indent(
    ss: Optional[Iterable[Any]], prefix: str, indent: str
) -> bytes:
    """Return json_string_indent encoded as UTF-8 bytes."""
    return json_string_indent(ss, prefix, indent).encode("utf-8")


def json_bytes(ss: Optional[Iterable[Any]]) -> bytes:
    """Return the elements as a compact JSON array; None gives ``[]``."""
    return ("[" + ",".join(_encoded(ss)) + "]").encode("utf-8")