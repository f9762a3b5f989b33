"""
Pytest configuration and fixtures for the embed messages plugin tests.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def make_user(user_id: int, avatar_url: str) -> SimpleNamespace:
    return SimpleNamespace(id=user_id, display_avatar=SimpleNamespace(url=avatar_url))


class FakeBot:
    """Stand-in for ``discord.Bot`` exposing a user cache and its own user."""

    def __init__(self, users=None, avatar_url: str = "https://cdn.example/bot.png") -> None:
        self._users = list(users or [])
        self.user = make_user(1, avatar_url)
        self.scan_count = 0

    @property
    def users(self):
        self.scan_count += 1
        return list(self._users)

    def add_user(self, user) -> None:
        self._users.append(user)


@pytest.fixture()
def staff_user() -> SimpleNamespace:
    return make_user(100, "https://cdn.example/staff.png")


@pytest.fixture()
def member_user() -> SimpleNamespace:
    return make_user(200, "https://cdn.example/member.png")


@pytest.fixture()
def bot(staff_user, member_user) -> FakeBot:
    return FakeBot([staff_user, member_user])
