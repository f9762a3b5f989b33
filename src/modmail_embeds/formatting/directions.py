"""
The six message directions the plugin formats for.

Each direction is described by a :class:`DirectionSpec`; the formatter reads
everything direction specific from it instead of duplicating the embed logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from modmail_embeds.configuration.embed_settings import SettingName


class Direction(Enum):
    """Sender/recipient/channel combination of a thread message."""

    STAFF_REPLY_DM = "staff_reply_dm"
    STAFF_REPLY_THREAD = "staff_reply_thread"
    USER_REPLY_THREAD = "user_reply_thread"
    SYSTEM_TO_USER_DM = "system_to_user_dm"
    SYSTEM_TO_USER_THREAD = "system_to_user_thread"
    SYSTEM_TO_STAFF_THREAD = "system_to_staff_thread"

    def __str__(self) -> str:
        return self.value


class AuthorStyle(Enum):
    """How the embed author block is resolved."""

    STAFF_DM = "staff_dm"
    STAFF_THREAD = "staff_thread"
    USER = "user"
    SYSTEM = "system"


@dataclass(frozen=True, slots=True)
class DirectionSpec:
    """Direction specific parameters of the shared embed algorithm.

    Attributes:
        direction: Which direction this spec formats.
        enabled_key: Setting that decides whether the formatter is registered.
        color_key: Setting holding the embed color.
        author_style: Author block resolution rule.
        show_footer: Whether the message number is shown in the footer.
        timestamp_key: Extra setting that must be enabled, on top of the
            global ``threadTimestamps`` switch, before a timestamp is added.
    """

    direction: Direction
    enabled_key: str
    color_key: str
    author_style: AuthorStyle
    show_footer: bool = False
    timestamp_key: str | None = None


DIRECTION_SPECS: Tuple[DirectionSpec, ...] = (
    DirectionSpec(
        Direction.STAFF_REPLY_DM,
        SettingName.STAFF_REPLY_DM_ENABLED,
        SettingName.STAFF_REPLY_DM_COLOR,
        AuthorStyle.STAFF_DM,
        timestamp_key=SettingName.STAFF_REPLY_DM_TIMESTAMP_ENABLED,
    ),
    DirectionSpec(
        Direction.STAFF_REPLY_THREAD,
        SettingName.STAFF_REPLY_THREAD_ENABLED,
        SettingName.STAFF_REPLY_THREAD_COLOR,
        AuthorStyle.STAFF_THREAD,
        show_footer=True,
    ),
    DirectionSpec(
        Direction.USER_REPLY_THREAD,
        SettingName.USER_REPLY_THREAD_ENABLED,
        SettingName.USER_REPLY_THREAD_COLOR,
        AuthorStyle.USER,
    ),
    DirectionSpec(
        Direction.SYSTEM_TO_USER_DM,
        SettingName.SYSTEM_USER_DM_ENABLED,
        SettingName.SYSTEM_USER_DM_COLOR,
        AuthorStyle.SYSTEM,
        timestamp_key=SettingName.STAFF_REPLY_DM_TIMESTAMP_ENABLED,
    ),
    DirectionSpec(
        Direction.SYSTEM_TO_USER_THREAD,
        SettingName.SYSTEM_USER_THREAD_ENABLED,
        SettingName.SYSTEM_USER_THREAD_COLOR,
        AuthorStyle.SYSTEM,
    ),
    DirectionSpec(
        Direction.SYSTEM_TO_STAFF_THREAD,
        SettingName.SYSTEM_STAFF_ENABLED,
        SettingName.SYSTEM_STAFF_COLOR,
        AuthorStyle.SYSTEM,
    ),
)

SPECS_BY_DIRECTION: Dict[Direction, DirectionSpec] = {spec.direction: spec for spec in DIRECTION_SPECS}
