"""
Embed formatting for thread messages.

- **directions.py**: The six message directions and the ``DirectionSpec``
  describing each one (color and enabled settings, author rule, footer,
  timestamp policy).

- **embed_formatter.py**: ``EmbedFormatter``, the single callable that turns a
  ``ThreadMessage`` into the ``{"embed": ...}`` payload for a direction.
"""
