"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def json_file(temp_dir):
    """Factory writing raw text to messages.json inside the temp directory."""
    def _write(text: str) -> Path:
        path = temp_dir / "messages.json"
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sample_messages_json():
    """Sample chat export document for testing."""
    return {
        "RoomName": "Weekend plans",
        "Messages": [
            {
                "ID": "message101",
                "DateSent": "12/30/2019 14:02:11",
                "SenderName": "Alice",
                "ReplyToID": "",
                "MessageType": 1,
                "Content": "Anyone up for a hike?",
                "MediaPath": "",
                "MediaThumbnailPath": ""
            },
            {
                "ID": "message102",
                "DateSent": "12/30/2019 14:05:47",
                "SenderName": "Bob",
                "ReplyToID": "message101",
                "MessageType": 1,
                "Content": "Sí, cuenta conmigo ☀",
                "MediaPath": "",
                "MediaThumbnailPath": ""
            },
            {
                "ID": "message103",
                "DateSent": "12/30/2019 14:06:02",
                "SenderName": "Bob",
                "ReplyToID": "",
                "MessageType": 2,
                "Content": None,
                "MediaPath": "video_files/trail.mp4",
                "MediaThumbnailPath": "video_files/trail.mp4_thumb.jpg"
            }
        ]
    }
