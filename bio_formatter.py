"""
Platform-specific bio formatting.

Renders a UserInfo record into one of six fixed bio templates, one per
platform. The additional info goes through the enhancer first.

Usage:
    python bio_formatter.py                          # sample profile, every platform
    python bio_formatter.py profile.json             # your profile, every platform
    python bio_formatter.py profile.json instagram   # your profile, one platform
"""

import json
import logging
import random
import sys
from pathlib import Path

from langchain_core.prompts import PromptTemplate

from info_enhancer import enhance_additional_info
from placeholders import generate_placeholder
from schemas import Platform, UserInfo, parse_platform
import config

logger = logging.getLogger(__name__)


class UnknownPlatformError(ValueError):
    """Raised in strict mode when the platform is not one of the six supported."""


# ──────────────────────────────────────────────
# Bio templates
# ──────────────────────────────────────────────

BIO_TEMPLATES = {
    Platform.TWITTER: PromptTemplate.from_template(
        "{channel_name} ✦ {niche}\n\n{enhanced_info}\n\n🔗 Let's connect:\n{links}"
    ),
    Platform.INSTAGRAM: PromptTemplate.from_template(
        "✨ {channel_name} ✨\n{niche} 🚀\n\n{enhanced_info}\n\n📍 Links & Socials\n👇\n{links}"
    ),
    Platform.YOUTUBE: PromptTemplate.from_template(
        "🎥 {channel_name}\n{niche} | Content Creator\n\n{enhanced_info}\n\n"
        "🎯 Subscribe for more content!\n📍 Links & Social Media:\n{links}"
    ),
    Platform.LINKEDIN: PromptTemplate.from_template(
        "{channel_name}\n{niche} | Content Creator & Industry Professional\n\n"
        "📌 About Me:\n{enhanced_info}\n\n🤝 Let's Connect:\n{links}"
    ),
    Platform.FARCASTER: PromptTemplate.from_template(
        "⚡\ufe0f {channel_name}\n{niche}\n\n{enhanced_info}\n\n🔗 Connect & Follow:\n{links}"
    ),
    Platform.BLUESKY: PromptTemplate.from_template(
        "✦ {channel_name} ✦\n{niche}\n\n{enhanced_info}\n\n🌐 Find me here:\n{links}"
    ),
}


# ──────────────────────────────────────────────
# Formatting
# ──────────────────────────────────────────────

def format_bio(
    platform: Platform | str,
    info: UserInfo,
    rng: random.Random | None = None,
    strict: bool | None = None,
) -> str:
    """
    Render the bio for one platform.

    Field values are inserted verbatim, except the niche on Instagram which is
    upper-cased. An unrecognized platform yields "" unless strict mode is on
    (argument, or BIO_STRICT_PLATFORM when omitted), which raises
    UnknownPlatformError instead.
    """
    if strict is None:
        strict = config.STRICT_PLATFORM

    resolved = parse_platform(platform)
    if resolved is None:
        if strict:
            raise UnknownPlatformError(f"Unknown platform: {platform!r}")
        logger.warning(f"Unknown platform {platform!r}, returning empty bio")
        return ""

    niche = info.niche.upper() if resolved is Platform.INSTAGRAM else info.niche
    return BIO_TEMPLATES[resolved].format(
        channel_name=info.channel_name,
        niche=niche,
        enhanced_info=enhance_additional_info(info.additional_info, rng),
        links=info.links,
    )


def format_all_bios(info: UserInfo, rng: random.Random | None = None) -> dict[Platform, str]:
    """Render the bio for every platform, in enum order."""
    return {p: format_bio(p, info, rng) for p in Platform}


# ──────────────────────────────────────────────
# Profile loading
# ──────────────────────────────────────────────

def load_user_info(path: Path) -> UserInfo:
    """Load a profile JSON file (snake_case or camelCase keys)."""
    with open(path, "r", encoding="utf-8") as f:
        return UserInfo.model_validate(json.load(f))


def default_platform() -> Platform:
    """BIO_DEFAULT_PLATFORM as a Platform; falls back to Twitter if it does not parse."""
    platform = parse_platform(config.DEFAULT_PLATFORM)
    if platform is None:
        logger.warning(
            f"Unknown BIO_DEFAULT_PLATFORM {config.DEFAULT_PLATFORM!r}, using {Platform.TWITTER.value}"
        )
        return Platform.TWITTER
    return platform


def sample_user_info(platform: Platform | str | None = None) -> UserInfo:
    """The form's example values, with the platform's placeholder as additional info."""
    if platform is None:
        platform = default_platform()
    return UserInfo(
        channel_name="Tech with Sarah",
        niche="Web Development | UI/UX Design",
        links="linktr.ee/techsarah",
        additional_info=generate_placeholder(platform),
    )


def main(argv: list[str]) -> int:
    profile_path = Path(argv[0]) if argv else None
    platform = argv[1] if len(argv) > 1 else None

    if profile_path is not None:
        if not profile_path.is_file():
            print(f"Profile not found: {profile_path}")
            return 1
        info = load_user_info(profile_path)
        logger.info(f"Loaded profile '{info.channel_name}' from {profile_path}")
    else:
        info = sample_user_info(platform)
        logger.info("No profile given, using the sample profile")

    rng = random.Random(config.RANDOM_SEED)

    if platform is not None:
        if parse_platform(platform) is None:
            print(f"Unknown platform '{platform}'. Choose one of: {', '.join(p.value for p in Platform)}")
            return 1
        print(format_bio(platform, info, rng))
        return 0

    for p, bio in format_all_bios(info, rng).items():
        print(f"\n--- {p.label} ---")
        print(bio)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    sys.exit(main(sys.argv[1:]))
