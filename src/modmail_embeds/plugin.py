"""
Plugin entry point.

``load_plugin`` is what the host calls on startup. It resolves the embed
settings, builds one formatter per direction and hands every enabled formatter
to the host's message format registry.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Protocol

import discord

from modmail_embeds import __version__
from modmail_embeds.configuration.app_configuration import AppConfig
from modmail_embeds.configuration.embed_settings import EmbedSettings, load_embed_settings
from modmail_embeds.formatting.directions import DIRECTION_SPECS, Direction
from modmail_embeds.formatting.embed_formatter import EmbedFormatter
from modmail_embeds.scheduler.periodic_scheduler import PeriodicTaskScheduler
from modmail_embeds.util.avatar_cache import AVATAR_CACHE_RESET_SECONDS, AvatarCache
from modmail_embeds.util.logger import get_logger

logger = get_logger("plugin")

Formatter = Callable[[Any], Dict[str, Any]]


class MessageFormats(Protocol):
    """Registry exposed by the host for replacing its message formatters."""

    def set_staff_reply_dm_formatter(self, formatter: Formatter) -> None: ...

    def set_staff_reply_thread_message_formatter(self, formatter: Formatter) -> None: ...

    def set_user_reply_thread_message_formatter(self, formatter: Formatter) -> None: ...

    def set_system_to_user_dm_formatter(self, formatter: Formatter) -> None: ...

    def set_system_to_user_thread_message_formatter(self, formatter: Formatter) -> None: ...

    def set_system_thread_message_formatter(self, formatter: Formatter) -> None: ...


# Registry setter used for each direction
REGISTRY_SETTERS: Mapping[Direction, str] = {
    Direction.STAFF_REPLY_DM: "set_staff_reply_dm_formatter",
    Direction.STAFF_REPLY_THREAD: "set_staff_reply_thread_message_formatter",
    Direction.USER_REPLY_THREAD: "set_user_reply_thread_message_formatter",
    Direction.SYSTEM_TO_USER_DM: "set_system_to_user_dm_formatter",
    Direction.SYSTEM_TO_USER_THREAD: "set_system_to_user_thread_message_formatter",
    Direction.SYSTEM_TO_STAFF_THREAD: "set_system_thread_message_formatter",
}


def build_formatters(
    settings: EmbedSettings,
    avatar_cache: AvatarCache,
    bot: discord.Bot,
    *,
    thread_timestamps: bool,
    fallback_role_name: str,
) -> Dict[Direction, EmbedFormatter]:
    """Build one formatter per direction, enabled or not."""
    return {
        spec.direction: EmbedFormatter(
            spec,
            settings,
            avatar_cache,
            bot,
            thread_timestamps=thread_timestamps,
            fallback_role_name=fallback_role_name,
        )
        for spec in DIRECTION_SPECS
    }


class EmbedMessagesPlugin:
    """Runtime state of the plugin: settings, avatar cache and formatters.

    The avatar cache is cleared every hour by a background task started with
    :meth:`start` and stopped with :meth:`shutdown`.
    """

    def __init__(
        self,
        settings: EmbedSettings,
        avatar_cache: AvatarCache,
        formatters: Dict[Direction, EmbedFormatter],
    ) -> None:
        self.settings = settings
        self.avatar_cache = avatar_cache
        self.formatters = formatters
        self.registered: list[Direction] = []
        self.cache_reset_scheduler = PeriodicTaskScheduler(
            "avatar cache",
            avatar_cache.clear,
            lambda: AVATAR_CACHE_RESET_SECONDS,
        )

    def enabled_directions(self) -> list[Direction]:
        """Return the directions whose formatter is enabled, in registration order."""
        return [
            direction
            for direction, formatter in self.formatters.items()
            if self.settings.is_enabled(formatter.spec.enabled_key)
        ]

    def register(self, formats: MessageFormats) -> list[Direction]:
        """Hand every enabled formatter to the host registry."""
        for direction in self.enabled_directions():
            setter = getattr(formats, REGISTRY_SETTERS[direction])
            setter(self.formatters[direction])
            self.registered.append(direction)
            logger.info("Registered %s formatter", direction)
        return self.registered

    def start(self) -> None:
        """Start the periodic avatar cache reset."""
        self.cache_reset_scheduler.start()

    async def shutdown(self) -> None:
        await self.cache_reset_scheduler.shutdown()


async def load_plugin(config: AppConfig, bot: discord.Bot, formats: MessageFormats) -> EmbedMessagesPlugin:
    """Load settings, register enabled formatters and return the running plugin.

    Must be awaited from the host's event loop; the hourly avatar cache reset
    is started before returning. Call :meth:`EmbedMessagesPlugin.shutdown` to
    stop it.

    Parameters
    ----------
    config:
        Host configuration; only ``threadTimestamps``, ``fallbackRoleName``
        and the ``em`` section are read.
    bot:
        Py-Cord bot whose user cache and avatar are used by the formatters.
    formats:
        Host registry receiving the formatters.
    """
    settings = load_embed_settings(config.embed_overrides)
    avatar_cache = AvatarCache(bot)
    formatters = build_formatters(
        settings,
        avatar_cache,
        bot,
        thread_timestamps=config.thread_timestamps,
        fallback_role_name=config.fallback_role_name,
    )

    plugin = EmbedMessagesPlugin(settings, avatar_cache, formatters)
    plugin.register(formats)
    plugin.start()

    logger.info("Version %s loaded", __version__)
    return plugin
