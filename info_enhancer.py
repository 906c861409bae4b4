"""
Additional-info enhancer.

Prefixes every non-blank line of the free-form "additional info" text with a
randomly chosen decoration, unless the line already starts with one.

Usage:
    from info_enhancer import enhance_additional_info
    enhanced = enhance_additional_info("5 years experience\\n🚀 Shipping daily")
"""

import logging
import random
import re

logger = logging.getLogger(__name__)

DECORATIONS = ["🌟", "⭐\ufe0f", "✨", "💫", "🎯", "🎨", "💻", "📱", "🎮", "🎓", "📚", "💡", "🔥", "🌈", "🚀"]

# Leading run of anything but ASCII word characters, then one of the
# decorations. The variation selector on ⭐️ is optional.
_DECORATED_LINE = re.compile(
    r"^\W*(?:"
    + "|".join(re.escape(d.rstrip("\ufe0f")) for d in DECORATIONS)
    + ")",
    re.ASCII,
)


def is_blank(line: str) -> bool:
    """Whitespace only; a byte order mark counts as whitespace."""
    return not line.replace("\ufeff", "").strip()


def is_decorated(line: str) -> bool:
    """Check whether a line already starts with a recognized decoration."""
    return _DECORATED_LINE.match(line) is not None


def enhance_line(line: str, rng: random.Random | None = None) -> str:
    if is_blank(line):
        return line
    if is_decorated(line):
        return line
    symbol = (rng or random).choice(DECORATIONS)
    return f"{symbol} {line}"


def enhance_additional_info(text: str, rng: random.Random | None = None) -> str:
    """
    Decorate each line of the additional info text.

    Blank lines and lines that already carry a decoration are kept verbatim;
    every other line gets one decoration picked uniformly at random, plus a
    space. Pass a seeded random.Random for reproducible output.
    """
    lines = text.split("\n")
    enhanced = [enhance_line(line, rng) for line in lines]
    logger.debug(
        f"Decorated {sum(1 for a, b in zip(lines, enhanced) if a != b)}/{len(lines)} lines"
    )
    return "\n".join(enhanced)
