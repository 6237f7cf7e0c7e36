from firebase_admin import firestore

from stem_notifications.config import settings
from stem_notifications.event_notifier import notify_event
from stem_notifications.recipients import FixedRecipientSelector, RecipientSelector
from stem_notifications.schemas import NotifyStatus


class StaticSelector(RecipientSelector):
    def __init__(self, recipients):
        self.recipients = recipients

    def select(self, event, event_id):
        return list(self.recipients)


def test_science_fair_event(firebase, make_snapshot):
    event = make_snapshot({"title": "Science Fair", "description": "A" * 200}, doc_id="evt-42")

    status = notify_event(firebase, event, "evt-42")

    assert status == NotifyStatus.WRITTEN
    firebase.add_notification.assert_called_once()
    written = firebase.add_notification.call_args.args[0]
    assert written == {
        "userId": settings.placeholder_recipient_id,
        "title": "🔔 NEW EVENT: Science Fair",
        "body": "A" * 150 + "...",
        "route": "/events/evt-42",
        "createdAt": firestore.SERVER_TIMESTAMP,
    }


def test_short_description_still_gets_ellipsis(firebase, make_snapshot):
    notify_event(firebase, make_snapshot({"title": "Chess", "description": "Club night"}), "e1")

    assert firebase.add_notification.call_args.args[0]["body"] == "Club night..."


def test_missing_snapshot_writes_nothing(firebase):
    assert notify_event(firebase, None, "e1") == NotifyStatus.MISSING_SNAPSHOT
    firebase.add_notification.assert_not_called()


def test_invalid_event_writes_nothing(firebase, make_snapshot):
    status = notify_event(firebase, make_snapshot({"title": {"en": "Fair"}}), "e1")

    assert status == NotifyStatus.INVALID_DOCUMENT
    firebase.add_notification.assert_not_called()


def test_event_without_fields(firebase, make_snapshot):
    notify_event(firebase, make_snapshot({}), "e1")

    written = firebase.add_notification.call_args.args[0]
    assert written["title"] == "🔔 NEW EVENT: "
    assert written["body"] == "..."


def test_write_failure_is_logged(firebase, make_snapshot, caplog):
    firebase.add_notification.side_effect = RuntimeError("permission denied")

    status = notify_event(firebase, make_snapshot({"title": "Fair", "description": "x"}), "e1")

    assert status == NotifyStatus.WRITE_FAILED
    assert firebase.add_notification.call_count == 1
    assert "Error writing notification" in caplog.text


def test_one_document_per_selected_recipient(firebase, make_snapshot):
    selector = StaticSelector(["u1", "u2", "u3"])

    status = notify_event(firebase, make_snapshot({"title": "Fair"}), "e1", selector=selector)

    assert status == NotifyStatus.WRITTEN
    recipients = [c.args[0]["userId"] for c in firebase.add_notification.call_args_list]
    assert recipients == ["u1", "u2", "u3"]


def test_partial_write_failure_continues(firebase, make_snapshot):
    firebase.add_notification.side_effect = [RuntimeError("unavailable"), "notif-2"]

    status = notify_event(firebase, make_snapshot({"title": "Fair"}), "e1", selector=StaticSelector(["u1", "u2"]))

    assert status == NotifyStatus.WRITE_FAILED
    assert firebase.add_notification.call_count == 2


def test_no_recipients(firebase, make_snapshot):
    status = notify_event(firebase, make_snapshot({"title": "Fair"}), "e1", selector=StaticSelector([]))

    assert status == NotifyStatus.NO_RECIPIENTS
    firebase.add_notification.assert_not_called()


def test_fixed_selector_ignores_event_content():
    selector = FixedRecipientSelector("mentor-1")

    assert selector.select(None, "e1") == ["mentor-1"]
    assert FixedRecipientSelector().select(None, "e2") == [settings.placeholder_recipient_id]


def test_replaying_event_builds_equal_documents(firebase, make_snapshot):
    event = make_snapshot({"title": "Fair", "description": "Bring a project"})

    notify_event(firebase, event, "e1")
    notify_event(firebase, event, "e1")

    first, second = [c.args[0] for c in firebase.add_notification.call_args_list]
    assert first == second
