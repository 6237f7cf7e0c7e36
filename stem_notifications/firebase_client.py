import json
import logging
from functools import lru_cache
from typing import Dict, Optional

import firebase_admin
from firebase_admin import credentials, firestore, messaging

from .config import settings
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


class FirebaseClient:
    """Firestore and FCM handles shared by the notification handlers."""

    def __init__(self, app: Optional[firebase_admin.App] = None, firestore_db=None):
        """
        Initialize the Firebase client.

        Args:
            app: An already initialized Firebase app
            firestore_db: An already created Firestore client

        When no Firestore client is given the Admin SDK is initialized from
        settings.
        """
        self.app = app
        self.firestore_db = firestore_db
        self.initialized = firestore_db is not None
        self.initialize()

    def initialize(self) -> None:
        """Initialize Firebase Admin SDK."""
        if self.initialized:
            return

        if self.app is None:
            try:
                # Try to get the existing default app
                self.app = firebase_admin.get_app()
                logger.info("Retrieved existing Firebase app")
            except ValueError:
                options = {}
                if settings.firebase_project_id:
                    options["projectId"] = settings.firebase_project_id
                self.app = firebase_admin.initialize_app(
                    credential=self._load_credential(),
                    options=options or None,
                )
                logger.info(f"Initialized Firebase app: {self.app.name}")

        self.firestore_db = firestore.client(self.app)
        self.initialized = True

    @staticmethod
    def _load_credential() -> Optional[credentials.Base]:
        cert_json = settings.firebase_secret
        if not cert_json:
            # Application default credentials of the hosting project
            return None

        cert_dict = json.loads(cert_json)
        if isinstance(cert_dict, str):
            cert_dict = json.loads(cert_dict)
        return credentials.Certificate(cert_dict)

    def get_user_document(self, user_id: str):
        """
        Read a user document.

        Args:
            user_id: The user's ID

        Returns:
            The document snapshot; check ``exists`` before reading it
        """
        return self.firestore_db.collection(settings.users_collection).document(user_id).get()

    def add_notification(self, notification_data: Dict) -> str:
        """
        Append a notification trigger document.

        Args:
            notification_data: Fields of the new document

        Returns:
            The auto-generated document ID
        """
        _, doc_ref = self.firestore_db.collection(settings.notifications_collection).add(notification_data)
        return doc_ref.id

    def send_message(self, message: messaging.Message) -> str:
        """
        Send one FCM message.

        Returns:
            The message ID assigned by FCM
        """
        return messaging.send(message, app=self.app)


@lru_cache(maxsize=None)
def get_firebase_client() -> FirebaseClient:
    """Process-wide client, created on first use together with logging."""
    setup_logging()
    return FirebaseClient()
