"""In-memory cache of user avatar URLs.

Scanning the bot's whole user cache on every message is slow on large
servers, so resolved URLs are remembered per user id. Entries never expire on
their own; the owner calls :meth:`AvatarCache.clear` periodically so changed
avatars are eventually picked up.
"""

from __future__ import annotations

from typing import Dict

import discord

from modmail_embeds.util.logger import get_logger

logger = get_logger("avatar_cache")

# One hour, see PeriodicTaskScheduler
AVATAR_CACHE_RESET_SECONDS = 60 * 60


class AvatarNotFoundError(LookupError):
    """Raised when a user is not present in the bot's user cache."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} is not in the bot's user cache")
        self.user_id = user_id


class AvatarCache:
    """Maps user ids to avatar URLs, looked up lazily from ``bot.users``."""

    def __init__(self, bot: discord.Bot) -> None:
        self._bot = bot
        self._avatars: Dict[int, str] = {}

    def get_avatar_url(self, user_id: int) -> str:
        """Return the avatar URL of ``user_id``.

        Raises:
            AvatarNotFoundError: If the user is not cached by the bot.
        """
        avatar_url = self._avatars.get(user_id)
        if avatar_url is not None:
            return avatar_url

        user = discord.utils.get(self._bot.users, id=user_id)
        if user is None:
            raise AvatarNotFoundError(user_id)

        avatar_url = str(user.display_avatar.url)
        self._avatars[user_id] = avatar_url
        return avatar_url

    def clear(self) -> None:
        """Drop every cached entry."""
        if self._avatars:
            logger.debug("Clearing %d cached avatar(s)", len(self._avatars))
        self._avatars.clear()

    def __len__(self) -> int:
        return len(self._avatars)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._avatars
