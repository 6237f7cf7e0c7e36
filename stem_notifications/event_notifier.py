import logging
from typing import Optional

from pydantic import ValidationError

from .firebase_client import FirebaseClient
from .payloads import build_event_notification
from .recipients import FixedRecipientSelector, RecipientSelector
from .schemas import EventDocument, NotifyStatus

logger = logging.getLogger(__name__)


def notify_event(firebase: FirebaseClient,
                 snapshot,
                 event_id: str,
                 selector: Optional[RecipientSelector] = None) -> NotifyStatus:
    """
    Write a notification trigger document for each recipient of a new event.

    Args:
        firebase: Client used to append the notification documents
        snapshot: Snapshot of the created event document, or None
        event_id: ID of the created event document
        selector: Picks the recipients; defaults to the fixed placeholder user

    Returns:
        The outcome. Write failures are logged, not retried.
    """
    if snapshot is None:
        logger.error(f"No snapshot data found for event {event_id}")
        return NotifyStatus.MISSING_SNAPSHOT

    try:
        event = EventDocument.model_validate(snapshot.to_dict() or {})
    except ValidationError as e:
        logger.error(f"Invalid event document {event_id}: {str(e)}")
        return NotifyStatus.INVALID_DOCUMENT

    selector = selector or FixedRecipientSelector()
    recipients = selector.select(event, event_id)
    if not recipients:
        logger.warning(f"No recipients selected for event {event_id}")
        return NotifyStatus.NO_RECIPIENTS

    status = NotifyStatus.WRITTEN
    for recipient_id in recipients:
        notification_data = build_event_notification(event, event_id, recipient_id)
        try:
            notification_id = firebase.add_notification(notification_data)
        except Exception as e:
            logger.error(f"Error writing notification for event {event_id} to user {recipient_id}: {str(e)}")
            status = NotifyStatus.WRITE_FAILED
            continue
        logger.info(f"Created notification {notification_id} for event {event_id} (user {recipient_id})")

    return status
