"""
Data schemas for the social media bio writer.

A UserInfo record is combined with one Platform to produce one bio string.
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


# --- Enums ---

class Platform(str, Enum):
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    LINKEDIN = "linkedin"
    FARCASTER = "farcaster"
    BLUESKY = "bluesky"

    @property
    def label(self) -> str:
        """Display name, e.g. 'YouTube'."""
        return PLATFORM_LABELS[self]


PLATFORM_LABELS = {
    Platform.TWITTER: "Twitter",
    Platform.INSTAGRAM: "Instagram",
    Platform.YOUTUBE: "YouTube",
    Platform.LINKEDIN: "LinkedIn",
    Platform.FARCASTER: "Farcaster",
    Platform.BLUESKY: "Bluesky",
}


# --- User input ---

class UserInfo(BaseModel):
    """Profile text collected from the form. Any string is valid, including empty."""
    model_config = ConfigDict(populate_by_name=True)

    channel_name: str = Field(
        default="",
        alias="channelName",
        description="Channel or profile name (e.g., 'Tech with Sarah')",
    )
    niche: str = Field(default="", description="Niche (e.g., 'Web Development | UI/UX Design')")
    links: str = Field(default="", description="Free text, may hold several URLs or lines")
    additional_info: str = Field(
        default="",
        alias="additionalInfo",
        description="Multi-line free text, decorated line by line when formatted",
    )

    def update(self, name: str, value: str) -> "UserInfo":
        """Return a copy with one field replaced. Accepts field names or their aliases."""
        for field_name, field in type(self).model_fields.items():
            if name in (field_name, field.alias):
                return self.model_copy(update={field_name: value})
        raise ValueError(f"Unknown UserInfo field: {name!r}")


def parse_platform(value: "Platform | str") -> Platform | None:
    """Coerce a platform member or its string value; None if unrecognized."""
    try:
        return Platform(value)
    except ValueError:
        return None
