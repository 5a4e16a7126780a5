"""Script-based language guessing.

Best effort only: looks for at least one character from each script's
Unicode block, in a fixed priority order, and maps the first hit to a
language code. Not a statistical classifier.
"""

import re

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_LANGUAGE = "en"

# First match wins. CJK ideographs are checked before kana, so kanji mixed
# with kana resolves to "zh".
_SCRIPT_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[\u4e00-\u9fff]"), "zh"),
    (re.compile(r"[\u3040-\u309f\u30a0-\u30ff]"), "ja"),
    (re.compile(r"[\uac00-\ud7af]"), "ko"),
    (re.compile(r"[\u0400-\u04ff]"), "ru"),
    (re.compile(r"[\u0600-\u06ff]"), "ar"),
    (re.compile(r"[a-zA-Z]"), "en"),
)


def detect_script_language(text: str) -> str:
    """Return a language code guessed from the characters in ``text``.

    Never raises. Empty or symbol-only input yields ``"en"``.
    """
    try:
        for pattern, code in _SCRIPT_PATTERNS:
            if pattern.search(text):
                return code
    except Exception as e:
        logger.error("heuristic_detection_failed", error=str(e))
    return DEFAULT_LANGUAGE
