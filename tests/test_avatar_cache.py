import pytest

from conftest import FakeBot, make_user
from modmail_embeds.util.avatar_cache import AvatarCache, AvatarNotFoundError


def test_first_lookup_scans_and_stores(bot: FakeBot) -> None:
    cache = AvatarCache(bot)

    assert cache.get_avatar_url(100) == "https://cdn.example/staff.png"
    assert bot.scan_count == 1
    assert 100 in cache
    assert len(cache) == 1


def test_second_lookup_is_served_from_cache(bot: FakeBot) -> None:
    cache = AvatarCache(bot)

    cache.get_avatar_url(200)
    cache.get_avatar_url(200)

    assert bot.scan_count == 1


def test_clear_forces_a_fresh_scan(bot: FakeBot) -> None:
    cache = AvatarCache(bot)
    cache.get_avatar_url(100)

    cache.clear()

    assert len(cache) == 0
    cache.get_avatar_url(100)
    assert bot.scan_count == 2


def test_clear_picks_up_changed_avatar() -> None:
    bot = FakeBot([make_user(5, "https://cdn.example/old.png")])
    cache = AvatarCache(bot)
    assert cache.get_avatar_url(5) == "https://cdn.example/old.png"

    bot._users = [make_user(5, "https://cdn.example/new.png")]
    assert cache.get_avatar_url(5) == "https://cdn.example/old.png"

    cache.clear()
    assert cache.get_avatar_url(5) == "https://cdn.example/new.png"


def test_missing_user_raises(bot: FakeBot) -> None:
    cache = AvatarCache(bot)

    with pytest.raises(AvatarNotFoundError) as excinfo:
        cache.get_avatar_url(999)

    assert excinfo.value.user_id == 999
    assert isinstance(excinfo.value, LookupError)
    assert 999 not in cache
