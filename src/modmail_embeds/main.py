"""
Configuration checker for the embed messages plugin.

Loads the host configuration file, resolves the embed settings exactly as the
plugin would on startup and prints the effective values, so a config change
can be verified without restarting the bot.

Usage: ``modmail-embeds [CONFIG_PATH]``
"""

import os
import sys
from pathlib import Path
from typing import Sequence

import yaml
from dotenv import load_dotenv

from modmail_embeds import __version__
from modmail_embeds.configuration.app_configuration import CONFIG_PATH, AppConfig
from modmail_embeds.configuration.embed_settings import SETTING_DEFINITIONS, SettingKind, load_embed_settings
from modmail_embeds.formatting.directions import DIRECTION_SPECS
from modmail_embeds.util.logger import get_logger

logger = get_logger("main")


def resolve_config_path(argv: Sequence[str]) -> Path:
    """Determine the configuration file to check.

    Resolution order:
    1. The first command line argument, if given.
    2. ``MODMAIL_EMBEDS_CONFIG`` environment variable (``.env`` is loaded first).
    3. ``./config/config.yml``.
    """
    if argv:
        return Path(argv[0]).resolve()

    load_dotenv()
    if env_path := os.getenv("MODMAIL_EMBEDS_CONFIG"):
        return Path(env_path).resolve()

    return CONFIG_PATH


def build_report(config: AppConfig) -> dict:
    """Return the effective plugin configuration as a plain mapping."""
    settings = load_embed_settings(config.embed_overrides)

    rendered = {}
    for definition in SETTING_DEFINITIONS:
        value = settings.get(definition.name)
        rendered[definition.name] = f"#{value:06X}" if definition.kind is SettingKind.COLOR else value

    return {
        "version": __version__,
        "threadTimestamps": config.thread_timestamps,
        "fallbackRoleName": config.fallback_role_name,
        "settings": rendered,
        "enabledDirections": [
            str(spec.direction) for spec in DIRECTION_SPECS if settings.is_enabled(spec.enabled_key)
        ],
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint printing the effective configuration.

    Returns
    -------
    int
        ``0`` on success, ``1`` when the configuration file cannot be read.
    """
    if argv is None:
        argv = sys.argv[1:]

    config_path = resolve_config_path(argv)
    if not config_path.is_file():
        logger.critical("Config file %s does not exist.", config_path)
        return 1

    config = AppConfig(config_path)
    report = build_report(config)
    sys.stdout.write(yaml.safe_dump(report, sort_keys=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
