"""Data types consumed by the plugin.

- **thread_message.py**: ``ThreadMessage``, the read-only record of a single
  message in a modmail thread.
"""
