"""Shared fixtures for the bio writer test suite."""

import pytest

from schemas import UserInfo


class FirstChoice:
    """Random source stub that always picks the first decoration (🌟)."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def sarah():
    return UserInfo(
        channel_name="Tech with Sarah",
        niche="Web Dev",
        links="linktr.ee/techsarah",
        additional_info="5 years experience",
    )


@pytest.fixture
def empty_info():
    return UserInfo()
