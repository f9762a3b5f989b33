"""
Thread message records handed to the formatters by the host.

The host stores thread messages as rows with snake_case columns; the plugin
only ever reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class ThreadMessage:
    """A single message exchanged between a user and staff.

    Attributes:
        body: Message text.
        user_id: Snowflake of the author.
        user_name: Display name of the author.
        role_name: Staff role shown next to the name, if any.
        is_anonymous: Whether a staff reply hides its author.
        attachments: Attachment URLs in the order they were sent.
        message_number: Sequence number of the message inside its thread.
    """

    body: str
    user_id: int
    user_name: str
    role_name: str | None = None
    is_anonymous: bool = False
    attachments: Tuple[str, ...] = field(default_factory=tuple)
    message_number: int | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "ThreadMessage":
        """Build a ThreadMessage from a host row mapping.

        Raises:
            KeyError: If ``user_id`` is missing.
        """
        return cls(
            body=str(row.get("body") or ""),
            user_id=int(row["user_id"]),
            user_name=str(row.get("user_name") or ""),
            role_name=row.get("role_name") or None,
            is_anonymous=bool(row.get("is_anonymous", False)),
            attachments=tuple(row.get("attachments") or ()),
            message_number=row.get("message_number"),
        )
