"""
Project configuration: bio formatting defaults, read from the environment / .env.
"""

import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def parse_seed(value: str | None) -> int | None:
    """Parse BIO_RANDOM_SEED; blank or malformed values mean no seed."""
    if not value or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring BIO_RANDOM_SEED={value!r}: not an integer")
        return None


# --- Bio formatting ---
# Checked against the Platform enum where it is used (bio_formatter.default_platform)
DEFAULT_PLATFORM = os.getenv("BIO_DEFAULT_PLATFORM", "twitter")
STRICT_PLATFORM = os.getenv("BIO_STRICT_PLATFORM", "").lower() in ("1", "true", "yes")

# Seed for the demo's random source; unset means a fresh draw every run
RANDOM_SEED = parse_seed(os.getenv("BIO_RANDOM_SEED"))
