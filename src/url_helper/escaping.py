"""ECMAScript string escaping for URLs that carry markup."""

from __future__ import annotations

_SCRIPT_MARKER = "<script"

_ESCAPES = {
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "<": "\\u003C",
    ">": "\\u003E",
    "\b": "\\b",
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\r": "\\r",
}


def contains_script(value: str) -> bool:
    """True if *value* contains ``<script`` in any letter case."""
    return _SCRIPT_MARKER in value.lower()


def _unicode_escape(ch: str) -> str:
    code = ord(ch)
    if code > 0xFFFF:
        # Astral characters are written as a UTF-16 surrogate pair.
        code -= 0x10000
        high = 0xD800 + (code >> 10)
        low = 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code:04X}"


def escape_ecmascript(value: str) -> str:
    """Escape *value* for use inside a JavaScript string literal.

    Quotes, backslash, ``/`` and angle brackets are backslash-escaped,
    control characters and everything above 0x7F become ``\\uXXXX``.
    """
    out: list[str] = []
    for ch in value:
        mapped = _ESCAPES.get(ch)
        if mapped is not None:
            out.append(mapped)
        elif ord(ch) < 32 or ord(ch) > 0x7F:
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return "".join(out)
