"""
Firebase admin initialization and helpers.

The backend talks to Firestore through the Firebase Admin SDK. Every
collection the site uses (Users, HealthMetrics, Appointments, ...) lives
in the same Firestore project.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from teenhealth.core.config import settings

logger = logging.getLogger(__name__)

# Global reference to avoid re-initialization
db = None


def init_firebase():
    """
    Initialize Firebase Admin SDK if not already initialized.

    The credentials path comes from FIREBASE_CREDENTIALS (env or .env).
    """
    global db

    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        return

    cred_path = settings.FIREBASE_CREDENTIALS

    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    cred = credentials.Certificate(cred_path)
    firebase_admin.initialize_app(cred)

    db = firestore.client()

    logger.info("Firebase Admin initialized successfully.")


def get_db():
    """Return the Firestore client, initializing Firebase on first use."""
    global db
    if db is None:
        init_firebase()
        if db is None:
            db = firestore.client()
    return db
