import logging
from typing import Optional

from firebase_admin.exceptions import FirebaseError
from pydantic import ValidationError

from .firebase_client import FirebaseClient
from .payloads import build_push_message
from .schemas import DispatchStatus, NotificationDocument, UserDocument

logger = logging.getLogger(__name__)


def dispatch_notification(firebase: FirebaseClient, snapshot, notification_id: Optional[str] = None) -> DispatchStatus:
    """
    Send the push message described by a newly created notification document.

    Args:
        firebase: Client used for the user lookup and the FCM send
        snapshot: Snapshot of the created document, or None
        notification_id: ID of the created document, for logging

    Returns:
        The outcome. Every failure is logged and swallowed; nothing is retried.
    """
    if snapshot is None:
        logger.error("No snapshot data found in event")
        return DispatchStatus.MISSING_SNAPSHOT

    try:
        notification = NotificationDocument.model_validate(snapshot.to_dict() or {})
    except ValidationError as e:
        logger.error(f"Invalid notification document {notification_id}: {str(e)}")
        return DispatchStatus.INVALID_DOCUMENT

    recipient_user_id = notification.userId
    if not recipient_user_id:
        logger.info(f"Notification document missing userId in: {notification_id}")
        return DispatchStatus.MISSING_USER_ID

    # Fetch the user's FCM token
    try:
        user_doc = firebase.get_user_document(recipient_user_id)
    except Exception as e:
        logger.error(f"Error fetching user {recipient_user_id}: {str(e)}")
        return DispatchStatus.LOOKUP_FAILED

    if not user_doc.exists:
        logger.info(f"No FCM token found for user: {recipient_user_id} (user not found)")
        return DispatchStatus.USER_NOT_FOUND

    try:
        user = UserDocument.model_validate(user_doc.to_dict() or {})
    except ValidationError as e:
        logger.error(f"Invalid user document {recipient_user_id}: {str(e)}")
        return DispatchStatus.INVALID_DOCUMENT

    if not user.fcmToken:
        logger.info(f"No FCM token found for user: {recipient_user_id}")
        return DispatchStatus.MISSING_TOKEN

    message = build_push_message(notification, user.fcmToken)

    try:
        response = firebase.send_message(message)
    except FirebaseError as e:
        logger.error(f"Error sending message to user {recipient_user_id} ({e.code}): {str(e)}")
        return DispatchStatus.SEND_FAILED
    except Exception as e:
        logger.error(f"Error sending message to user {recipient_user_id}: {str(e)}")
        return DispatchStatus.SEND_FAILED

    logger.info(f"Successfully sent message: {response}")
    return DispatchStatus.SENT
