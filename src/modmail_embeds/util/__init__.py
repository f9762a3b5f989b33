"""
Utility functions and helpers for the embed messages plugin.

- **logger.py**: Centralized logging configuration with colored console output
  (through prompt_toolkit) and a per-session rotating log file.

- **parsing_utils.py**: ``parse_color`` and ``parse_custom_boolean`` for the
  loosely typed values found in configuration files.

- **avatar_cache.py**: ``AvatarCache``, a user id to avatar URL map filled
  lazily from the bot's user cache.
"""
