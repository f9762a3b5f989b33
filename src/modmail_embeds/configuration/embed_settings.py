"""
Typed embed settings for the plugin.

Every setting is declared once in ``SETTING_DEFINITIONS`` together with its
kind and default. ``load_embed_settings`` applies the ``em`` section of the
host configuration on top of the defaults and returns a frozen
:class:`EmbedSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from modmail_embeds.util.logger import get_logger
from modmail_embeds.util.parsing_utils import parse_color, parse_custom_boolean

logger = get_logger("embed_settings")


class SettingKind(Enum):
    """How the raw override of a setting is coerced."""

    BOOLEAN = "boolean"
    COLOR = "color"

    def __str__(self) -> str:
        return self.value


class SettingName:
    """Stable names of every recognised setting."""

    # Staff -> User
    STAFF_REPLY_DM_ENABLED = "staffReplyDmEnabled"
    STAFF_REPLY_DM_COLOR = "staffReplyDmColor"
    STAFF_REPLY_THREAD_ENABLED = "staffReplyThreadEnabled"
    STAFF_REPLY_THREAD_COLOR = "staffReplyThreadColor"
    STAFF_REPLY_DM_TIMESTAMP_ENABLED = "staffReplyDmTimestampEnabled"

    # User -> Staff
    USER_REPLY_THREAD_ENABLED = "userReplyThreadEnabled"
    USER_REPLY_THREAD_COLOR = "userReplyThreadColor"

    # System -> Any
    SYSTEM_USER_DM_ENABLED = "systemReplyDmEnabled"
    SYSTEM_USER_DM_COLOR = "systemReplyDmColor"
    SYSTEM_USER_THREAD_ENABLED = "systemReplyThreadEnabled"
    SYSTEM_USER_THREAD_COLOR = "systemReplyThreadColor"
    SYSTEM_STAFF_ENABLED = "systemStaffEnabled"
    SYSTEM_STAFF_COLOR = "systemStaffColor"


@dataclass(frozen=True, slots=True)
class SettingDefinition:
    """A recognised setting: its name, kind and default."""

    name: str
    kind: SettingKind
    default: bool | int

    def coerce(self, raw: Any) -> bool | int | None:
        """Coerce a raw override, returning ``None`` when it is invalid."""
        if self.kind is SettingKind.BOOLEAN:
            return parse_custom_boolean(raw)
        return parse_color(raw)


def _color(value: str) -> int:
    parsed = parse_color(value)
    if parsed is None:
        raise ValueError(f"Invalid default color {value!r}")
    return parsed


SETTING_DEFINITIONS: Tuple[SettingDefinition, ...] = (
    SettingDefinition(SettingName.STAFF_REPLY_DM_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.STAFF_REPLY_DM_COLOR, SettingKind.COLOR, _color("#2ECC71")),
    SettingDefinition(SettingName.STAFF_REPLY_THREAD_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.STAFF_REPLY_THREAD_COLOR, SettingKind.COLOR, _color("#2ECC71")),
    SettingDefinition(SettingName.STAFF_REPLY_DM_TIMESTAMP_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.USER_REPLY_THREAD_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.USER_REPLY_THREAD_COLOR, SettingKind.COLOR, _color("#9C32A8")),
    SettingDefinition(SettingName.SYSTEM_USER_DM_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.SYSTEM_USER_DM_COLOR, SettingKind.COLOR, _color("#5865F2")),
    SettingDefinition(SettingName.SYSTEM_USER_THREAD_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.SYSTEM_USER_THREAD_COLOR, SettingKind.COLOR, _color("#5865F2")),
    SettingDefinition(SettingName.SYSTEM_STAFF_ENABLED, SettingKind.BOOLEAN, True),
    SettingDefinition(SettingName.SYSTEM_STAFF_COLOR, SettingKind.COLOR, _color("#1AA4BC")),
)

DEFINITIONS_BY_NAME: Mapping[str, SettingDefinition] = MappingProxyType(
    {definition.name: definition for definition in SETTING_DEFINITIONS}
)


@dataclass(frozen=True, slots=True)
class EmbedSettings:
    """Resolved, read-only settings values keyed by setting name."""

    values: Mapping[str, bool | int] = field(
        default_factory=lambda: MappingProxyType({d.name: d.default for d in SETTING_DEFINITIONS})
    )

    def get(self, name: str) -> bool | int:
        """Return the value of ``name``; raises ``KeyError`` for unknown names."""
        return self.values[name]

    def is_enabled(self, name: str) -> bool:
        return bool(self.values[name])

    def color(self, name: str) -> int:
        return int(self.values[name])

    def as_dict(self) -> Dict[str, bool | int]:
        """Return a mutable snapshot of the values."""
        return dict(self.values)


def load_embed_settings(overrides: Mapping[str, Any] | None = None) -> EmbedSettings:
    """Apply configuration overrides on top of the defaults.

    Unknown names and unparseable values are logged and skipped, leaving the
    previous value in place.
    """
    values: Dict[str, bool | int] = {d.name: d.default for d in SETTING_DEFINITIONS}

    if overrides is None:
        overrides = {}
    elif not isinstance(overrides, Mapping):
        logger.warning("Embed settings must be a mapping, got %s; using defaults", type(overrides).__name__)
        overrides = {}

    for name, raw in overrides.items():
        definition = DEFINITIONS_BY_NAME.get(name)
        if definition is None:
            logger.warning("Setting %s is not a valid setting", name)
            continue

        parsed = definition.coerce(raw)
        if parsed is None:
            if definition.kind is SettingKind.BOOLEAN:
                logger.warning("Value %s is not a valid truthy or falsy value", raw)
            else:
                logger.warning("Value %s is not a valid RGB or HEX color", raw)
            continue

        values[name] = parsed
        logger.debug("Setting %s overridden with %r", name, parsed)

    return EmbedSettings(MappingProxyType(values))
