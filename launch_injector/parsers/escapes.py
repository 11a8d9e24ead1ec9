"""Decoding of ``@@hex`` escape tokens.

Paths handed over through ``DLI_CONFIG`` may carry characters that are awkward
to pass through a shell or a build tool. Such characters are written as ``@@``
followed by hex digits naming a UTF-16 code unit, e.g. ``a@@20b`` for ``a b``.

A token is either exactly four hex digits or, when fewer than four follow the
marker, the first one or two of them. A run of three hex digits therefore
reads as a two-digit code followed by a literal character: ``@@20b`` is
``" b"``, while ``@@20bf`` is the single character U+20BF.
"""

from __future__ import annotations

import re

ESCAPE_MARKER = "@@"
ESCAPE_PATTERN = re.compile(r"@@([0-9a-fA-F]{4}|[0-9a-fA-F]{1,2})")
_SURROGATE_PATTERN = re.compile("[\ud800-\udfff]")


def _replace(match: re.Match) -> str:
    return chr(int(match.group(1), 16))


def _join_surrogates(text: str) -> str:
    # Adjacent high/low surrogates become one character, lone ones are kept.
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def decode_escaped(text: str) -> str:
    """Replace every ``@@`` hex token with its character.

    Text that does not form a complete token is copied unchanged, so
    ``decode_escaped("@@zz")`` returns ``"@@zz"``.
    """

    if ESCAPE_MARKER not in text:
        return text
    decoded = ESCAPE_PATTERN.sub(_replace, text)
    if _SURROGATE_PATTERN.search(decoded):
        decoded = _join_surrogates(decoded)
    return decoded
