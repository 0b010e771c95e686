from __future__ import annotations

from urllib.parse import quote, unquote

# Left alone by the percent-encoder: RFC 2396 marks plus RFC 5870 p-unreserved.
_MARK_CHARS = "!*'()"
_P_UNRESERVED_CHARS = "[]:&+$"


def read_param(token: str) -> tuple[str, str]:
    """Split a ``name=value`` or ``name`` token into a name-value pair.

    Flags get an empty value. The value is percent-decoded, ``+`` is kept.
    """

    name, _, value = token.partition("=")
    return name, unquote(value)


def write_param(name: str, value: str) -> str:
    if value == "":
        return name
    encoded = quote(value, safe=_MARK_CHARS + _P_UNRESERVED_CHARS)
    return f"{name}={encoded}"
