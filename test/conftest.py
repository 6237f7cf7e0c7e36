from unittest.mock import MagicMock

import pytest

from stem_notifications.firebase_client import FirebaseClient


@pytest.fixture
def make_snapshot():
    """Builds stand-ins for Firestore DocumentSnapshots."""
    def _make(data=None, exists=True, doc_id="doc-1"):
        snapshot = MagicMock()
        snapshot.exists = exists
        snapshot.id = doc_id
        snapshot.to_dict.return_value = data if exists else None
        return snapshot
    return _make


@pytest.fixture
def firebase():
    client = MagicMock(spec=FirebaseClient)
    client.send_message.return_value = "projects/stem-app/messages/1"
    client.add_notification.return_value = "notif-1"
    return client
