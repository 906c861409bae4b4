"""Tests for the Platform enum, UserInfo model and placeholders."""

import pytest
from pydantic import ValidationError

from placeholders import PLACEHOLDERS, generate_placeholder
from schemas import Platform, UserInfo, parse_platform


def test_six_platforms():
    assert [p.value for p in Platform] == [
        "twitter", "instagram", "youtube", "linkedin", "farcaster", "bluesky",
    ]


def test_platform_labels():
    assert Platform.YOUTUBE.label == "YouTube"
    assert Platform.LINKEDIN.label == "LinkedIn"
    assert {p.label for p in Platform} == {
        "Twitter", "Instagram", "YouTube", "LinkedIn", "Farcaster", "Bluesky",
    }


def test_parse_platform():
    assert parse_platform("bluesky") is Platform.BLUESKY
    assert parse_platform(Platform.FARCASTER) is Platform.FARCASTER
    assert parse_platform("Bluesky") is None
    assert parse_platform("") is None


def test_user_info_defaults_empty():
    info = UserInfo()
    assert info.channel_name == ""
    assert info.niche == ""
    assert info.links == ""
    assert info.additional_info == ""


def test_user_info_accepts_both_key_styles():
    camel = UserInfo.model_validate({"channelName": "Sam", "additionalInfo": "hi"})
    snake = UserInfo.model_validate({"channel_name": "Sam", "additional_info": "hi"})
    assert camel == snake


def test_user_info_rejects_non_string():
    with pytest.raises(ValidationError):
        UserInfo(niche=["not", "a", "string"])


def test_update_returns_copy():
    info = UserInfo(channel_name="Sam")
    updated = info.update("niche", "Games")
    assert updated.niche == "Games"
    assert updated.channel_name == "Sam"
    assert info.niche == ""


def test_update_by_alias():
    assert UserInfo().update("additionalInfo", "line").additional_info == "line"


def test_update_unknown_field():
    with pytest.raises(ValueError, match="bio"):
        UserInfo().update("bio", "x")


@pytest.mark.parametrize("platform", list(Platform))
def test_placeholder_per_platform(platform):
    text = generate_placeholder(platform)
    assert text == PLACEHOLDERS[platform]
    assert len(text.split("\n")) == 3


def test_placeholder_unknown_platform():
    assert generate_placeholder("myspace") == ""
    assert generate_placeholder("twitter").startswith("🎓 5+ years in tech")
