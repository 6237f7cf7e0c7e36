"""Cloud Functions for Firebase entry points.

Deploy with ``firebase deploy --only functions``. Each trigger adapts the
platform event and hands it to a plain handler with the process-wide
Firebase client.
"""
import logging
from typing import Optional

from firebase_functions import firestore_fn

from stem_notifications import FirebaseClient, dispatch_notification, get_firebase_client, notify_event

logger = logging.getLogger(__name__)


def _firebase_client() -> Optional[FirebaseClient]:
    # A failed setup is not cached, the next invocation tries again
    try:
        return get_firebase_client()
    except Exception as e:
        logger.error(f"Failed to initialize Firebase: {str(e)}")
        return None


@firestore_fn.on_document_created(document="notifications/{notificationId}")
def send_notification_on_create(event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]]) -> None:
    firebase = _firebase_client()
    if firebase is None:
        return
    dispatch_notification(firebase, event.data, event.params["notificationId"])


@firestore_fn.on_document_created(document="events/{eventId}")
def notify_on_event_create(event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]]) -> None:
    firebase = _firebase_client()
    if firebase is None:
        return
    notify_event(firebase, event.data, event.params["eventId"])
