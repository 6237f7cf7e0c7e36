from abc import ABC, abstractmethod
from typing import List, Optional

from .config import settings
from .schemas import EventDocument


class RecipientSelector(ABC):
    """Decides which users are told about a new event."""

    @abstractmethod
    def select(self, event: EventDocument, event_id: str) -> List[str]:
        """Return the user IDs to notify for the event."""


class FixedRecipientSelector(RecipientSelector):
    """Always selects one configured user, whatever the event says."""

    def __init__(self, recipient_id: Optional[str] = None):
        self.recipient_id = recipient_id or settings.placeholder_recipient_id

    def select(self, event: EventDocument, event_id: str) -> List[str]:
        # TODO: replace with a query over subscribed users or an FCM topic broadcast
        return [self.recipient_id]
