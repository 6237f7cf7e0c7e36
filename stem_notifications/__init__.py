from .dispatcher import dispatch_notification
from .event_notifier import notify_event
from .firebase_client import FirebaseClient, get_firebase_client
from .recipients import FixedRecipientSelector, RecipientSelector
from .schemas import DispatchStatus, NotifyStatus

__all__ = [
    "dispatch_notification",
    "notify_event",
    "FirebaseClient",
    "get_firebase_client",
    "FixedRecipientSelector",
    "RecipientSelector",
    "DispatchStatus",
    "NotifyStatus",
]
