"""Pseudolocalization of message text."""

from __future__ import annotations

import re
import string
from functools import lru_cache

_TRANSFORM_SMALL = "aƀƈḓeƒɠħiĵķŀḿƞoƥɋřşŧuṽẇẋẏẑ"
_TRANSFORM_CAPS = "AƁƇḒEƑƓĦIĴĶĿḾȠOƤɊŘŞŦUṼẆẊẎẐ"
_FLIPPED_SMALL = "ɐqɔpǝɟƃɥıɾʞʅɯuodbɹsʇnʌʍxʎz"
_FLIPPED_CAPS = "∀ԐↃᗡƎℲ⅁HIſӼ⅂WNOԀÒᴚS⊥∩ɅMX⅄Z"

# XML entities (&#x202a;) and XML tags are left untouched.
_RE_EXCLUDED = re.compile(r"&[#\w]+;|<\s*.+?\s*>")

# Vowels doubled to emulate roughly 30% longer text.
_ELONGATED = frozenset("aeou")


@lru_cache(maxsize=None)
def _table(flipped: bool, elongate: bool) -> dict[int, str]:
    small, caps = (
        (_FLIPPED_SMALL, _FLIPPED_CAPS) if flipped else (_TRANSFORM_SMALL, _TRANSFORM_CAPS)
    )
    mapping = {
        plain: replacement * 2 if elongate and plain in _ELONGATED else replacement
        for plain, replacement in zip(string.ascii_lowercase, small)
    }
    mapping.update(zip(string.ascii_uppercase, caps))
    return str.maketrans(mapping)


def transform(s: str, flipped: bool, elongate: bool) -> str:
    """Replace ASCII letters with accented or flipped look-alikes."""
    return s.translate(_table(flipped, elongate))


def transform_dom(s: str, flipped: bool, elongate: bool, with_markers: bool) -> str:
    """Transform text while leaving markup tags and entities intact."""
    # Access keys and other single-character messages stay as they are.
    if len(s.encode("utf-8")) == 1:
        return s

    parts: list[str] = []
    pos = 0
    for match in _RE_EXCLUDED.finditer(s):
        parts.append(transform(s[pos : match.start()], False, True))
        parts.append(match.group())
        pos = match.end()
    parts.append(transform(s[pos:], flipped, elongate))
    result = "".join(parts)

    if with_markers:
        return f"[{result}]"
    return result