from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)

WHITESPACE_CHARACTERS = "\n\r\t"
STRIP_CHARACTERS = "`~!@#$%^&*()-_=+[{]};:'\",<.>/?\\|0123456789"

_TRANSLATION_TABLE = str.maketrans(
    WHITESPACE_CHARACTERS,
    " " * len(WHITESPACE_CHARACTERS),
    STRIP_CHARACTERS,
)


def normalize(raw: str) -> str:
    """Turn raw file contents into canonical text.

    The text is lowercased and trimmed, newlines, carriage returns and tabs
    become single spaces, and punctuation and digits are deleted outright, so
    ``don't`` becomes ``dont`` rather than two words. Anything else passes
    through lowercased. The result is trimmed once more because deleting
    characters can expose whitespace at either edge.
    """

    cleaned = raw.lower().strip()
    cleaned = cleaned.translate(_TRANSLATION_TABLE)
    canonical = cleaned.strip()
    LOGGER.debug("Normalized %d characters into %d", len(raw), len(canonical))
    return canonical
