"""
Embed creation for thread messages.

A single :class:`EmbedFormatter` implements the embed algorithm shared by all
directions; the :class:`DirectionSpec` it is built with decides color, author,
footer and timestamp behaviour.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence

import discord

from modmail_embeds.configuration.embed_settings import EmbedSettings
from modmail_embeds.datatypes.thread_message import ThreadMessage
from modmail_embeds.formatting.directions import AuthorStyle, DirectionSpec
from modmail_embeds.util.avatar_cache import AvatarCache

IMAGE_EXTENSIONS = (".png", ".jpg", ".gif")
SYSTEM_AUTHOR_NAME = "System"


def is_image_attachment(url: str) -> bool:
    """Return True when the URL ends in an embeddable image extension (case-sensitive)."""
    return url.endswith(IMAGE_EXTENSIONS)


def build_description(body: str, attachments: Sequence[str]) -> tuple[str, str | None]:
    """Return the embed description and the image URL, if any.

    A single image attachment becomes the embed image; every other attachment
    is appended to the body on its own line.
    """
    if len(attachments) == 1 and is_image_attachment(attachments[0]):
        return body, attachments[0]

    lines = [body, *attachments]
    return "\n".join(lines), None


class EmbedFormatter:
    """Callable turning a thread message into an ``{"embed": ...}`` payload.

    Args:
        spec: Direction specific parameters.
        settings: Resolved embed settings.
        avatar_cache: Cache used to look up author avatars.
        bot: Bot whose own avatar is used for anonymous and system messages.
        thread_timestamps: Global switch for embed timestamps.
        fallback_role_name: Role shown for staff replies without a role.
    """

    def __init__(
        self,
        spec: DirectionSpec,
        settings: EmbedSettings,
        avatar_cache: AvatarCache,
        bot: discord.Bot,
        *,
        thread_timestamps: bool,
        fallback_role_name: str,
    ) -> None:
        self.spec = spec
        self.settings = settings
        self.avatar_cache = avatar_cache
        self.bot = bot
        self.thread_timestamps = thread_timestamps
        self.fallback_role_name = fallback_role_name

    def __repr__(self) -> str:
        return f"EmbedFormatter({self.spec.direction})"

    def __call__(self, thread_message: ThreadMessage | Mapping[str, Any]) -> Dict[str, Any]:
        return self.format(thread_message)

    # --------------------------
    # Private helpers
    # --------------------------
    def _bot_avatar_url(self) -> str | None:
        if self.bot.user is None:
            return None
        return str(self.bot.user.display_avatar.url)

    def _resolve_author(self, message: ThreadMessage) -> tuple[str, str | None]:
        """Return the author name and icon URL for ``message``."""
        style = self.spec.author_style

        if style is AuthorStyle.SYSTEM:
            return SYSTEM_AUTHOR_NAME, self._bot_avatar_url()

        if style is AuthorStyle.USER:
            return message.user_name, self.avatar_cache.get_avatar_url(message.user_id)

        role_name = message.role_name or self.fallback_role_name
        if not message.is_anonymous:
            return f"{message.user_name} ({role_name})", self.avatar_cache.get_avatar_url(message.user_id)

        if style is AuthorStyle.STAFF_THREAD:
            # Trailing space is part of the expected author name
            return f"{role_name} ({message.user_name}) ", self._bot_avatar_url()
        return role_name, self._bot_avatar_url()

    def _should_timestamp(self) -> bool:
        if not self.thread_timestamps:
            return False
        if self.spec.timestamp_key is None:
            return True
        return self.settings.is_enabled(self.spec.timestamp_key)

    # --------------------------
    # Public API
    # --------------------------
    def build_embed(self, message: ThreadMessage) -> discord.Embed:
        """Build the Discord embed for ``message``.

        Raises:
            AvatarNotFoundError: If the author's avatar is needed but the
                author is not in the bot's user cache.
        """
        description, image_url = build_description(message.body, message.attachments)

        embed = discord.Embed(
            description=description,
            color=self.settings.color(self.spec.color_key),
            timestamp=discord.utils.utcnow() if self._should_timestamp() else None,
        )

        author_name, icon_url = self._resolve_author(message)
        embed.set_author(name=author_name, icon_url=icon_url)

        if image_url is not None:
            embed.set_image(url=image_url)

        if self.spec.show_footer:
            embed.set_footer(text=f"#{message.message_number}")

        return embed

    def format(self, thread_message: ThreadMessage | Mapping[str, Any]) -> Dict[str, Any]:
        """Return the ``{"embed": ...}`` payload expected by the host."""
        if not isinstance(thread_message, ThreadMessage):
            thread_message = ThreadMessage.from_mapping(thread_message)

        embed = self.build_embed(thread_message)
        payload = embed.to_dict()
        # py-cord drops an empty description; the host always expects one
        payload.setdefault("description", embed.description or "")
        return {"embed": payload}
