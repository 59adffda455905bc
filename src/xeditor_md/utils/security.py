#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input validation for values copied into Markdown syntax.

Code fence info strings come from untrusted class attributes on export and
from fence lines on import. Both paths pass through
:func:`sanitize_language_identifier` so a language string can never break
out of the fence line.

"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

MAX_LANGUAGE_IDENTIFIER_LENGTH = 50
SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[A-Za-z0-9_+#.\-]+$"


def sanitize_language_identifier(language: str | None) -> str:
    r"""Sanitize a code fence language identifier.

    Parameters
    ----------
    language : str or None
        Raw language identifier string

    Returns
    -------
    str
        The stripped identifier, or an empty string if it is missing, too
        long, or contains characters outside ``[A-Za-z0-9_+#.-]``

    Examples
    --------
    >>> sanitize_language_identifier("python")
    'python'
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("python\nmalicious")
    ''

    """
    if not language:
        return ""

    language = language.strip()

    if len(language) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            f"Language identifier exceeds maximum length ({MAX_LANGUAGE_IDENTIFIER_LENGTH}): {language[:50]}..."
        )
        return ""

    if not re.match(SAFE_LANGUAGE_IDENTIFIER_PATTERN, language):
        logger.debug(f"Dropped language identifier containing invalid characters: {language[:50]!r}")
        return ""

    return language
