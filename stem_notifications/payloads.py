from typing import Dict

from firebase_admin import firestore, messaging

from .config import settings
from .schemas import EventDocument, NotificationDocument


def build_push_message(notification: NotificationDocument, token: str) -> messaging.Message:
    """
    Build the FCM message for a notification trigger document.

    Args:
        notification: The validated trigger document
        token: The recipient's FCM registration token

    Returns:
        A message targeting the token, with routing data for the Flutter client
    """
    return messaging.Message(
        token=token,
        notification=messaging.Notification(
            title=notification.title or settings.default_title,
            body=notification.body or settings.default_body,
        ),
        data={
            'click_action': settings.click_action,
            'route': notification.route or settings.default_route,
        },
        android=messaging.AndroidConfig(
            notification=messaging.AndroidNotification(
                channel_id=settings.android_channel_id,
            ),
        ),
    )


def truncate_description(description: str) -> str:
    limit = settings.max_description_length
    if settings.ellipsis_only_when_truncated and len(description) <= limit:
        return description
    return description[:limit] + settings.ellipsis


def event_route(event_id: str) -> str:
    return f"/events/{event_id}"


def build_event_notification(event: EventDocument, event_id: str, recipient_id: str) -> Dict:
    """
    Build the notification trigger document announcing a new event.

    Args:
        event: The validated event document
        event_id: ID of the triggering event document
        recipient_id: The user to notify

    Returns:
        Fields for a new document in the notifications collection
    """
    return {
        'userId': recipient_id,
        'title': f"{settings.event_title_prefix}{event.title or ''}",
        'body': truncate_description(event.description or ''),
        'route': event_route(event_id),
        'createdAt': firestore.SERVER_TIMESTAMP,
    }
