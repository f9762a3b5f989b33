"""
Configuration management for the embed messages plugin.

- **app_configuration.py**: File-locked YAML loader for the host configuration.
  Exposes the global ``threadTimestamps`` switch, the ``fallbackRoleName`` and
  the ``em`` section of embed overrides. Falls back to empty values on missing
  or malformed files.

- **embed_settings.py**: Declares every embed setting with an explicit kind
  (boolean or color) and default, and resolves overrides into a frozen
  ``EmbedSettings`` value.
"""
