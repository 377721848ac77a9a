"""URL escaping with the two classic strictness levels.

Without param, URI reserved characters (; , / ? : @ & = + $ #) are left as
they are, so a whole URL stays usable. With param, everything but
unreserved characters is escaped, for use as a single query value.
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote

_COMPONENT_SAFE = "-_.!~*'()"
_RESERVED = ";,/?:@&=+$#"

_RESERVED_ESCAPE = re.compile(r"(%(?:2[346BCF]|3[ABDF]|40))", re.IGNORECASE)


def escape_url(url: str, param: bool = False) -> str:
    """escape_url("a b/c?d=1")        # "a%20b/c?d=1"
    escape_url("a b/c?d=1", True)     # "a%20b%2Fc%3Fd%3D1"
    """
    safe = _COMPONENT_SAFE if param else _COMPONENT_SAFE + _RESERVED
    return quote(url, safe=safe)


def unescape_url(url: str, param: bool = False) -> str:
    """Reverse escape_url(). Without param, escaped reserved characters stay escaped."""
    if param:
        return unquote(url)
    parts = _RESERVED_ESCAPE.split(url)
    # Odd indexes hold the reserved escapes captured by split().
    return "".join(part if index % 2 else unquote(part) for index, part in enumerate(parts))
