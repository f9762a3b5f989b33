import pytest

from modmail_embeds.datatypes.thread_message import ThreadMessage


def test_from_mapping_converts_host_row():
    message = ThreadMessage.from_mapping(
        {
            "body": "hello",
            "user_id": "42",
            "user_name": "Carol",
            "role_name": "",
            "is_anonymous": 1,
            "attachments": ["a.png", "b.txt"],
            "message_number": 3,
        }
    )

    assert message.user_id == 42
    assert message.role_name is None
    assert message.is_anonymous is True
    assert message.attachments == ("a.png", "b.txt")
    assert message.message_number == 3


def test_from_mapping_defaults():
    message = ThreadMessage.from_mapping({"user_id": 1})

    assert message.body == ""
    assert message.attachments == ()
    assert message.is_anonymous is False


def test_from_mapping_requires_user_id():
    with pytest.raises(KeyError):
        ThreadMessage.from_mapping({"body": "x"})


def test_thread_message_is_immutable():
    message = ThreadMessage(body="x", user_id=1, user_name="u")
    with pytest.raises(AttributeError):
        message.body = "y"  # type: ignore[misc]
