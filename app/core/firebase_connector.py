"""
Module for initializing the Firebase Admin SDK with robust handling of credentials.

Behavior:
- If Firebase app already initialized, do nothing.
- Read credentials from `settings.FIREBASE_CREDENTIALS_JSON` (preferred).
  * If value looks like JSON (starts with '{'), parse it and use Certificate(dict).
  * Otherwise treat it as a path to a JSON file and load it.
- If `settings.FIREBASE_CREDENTIALS_JSON` is empty, fall back to the
  GOOGLE_APPLICATION_CREDENTIALS environment variable (path to file).
- Validate that the credential dict contains 'type' == 'service_account' and
  raise a clear ValueError otherwise.

The Firestore client is process-wide: `get_firestore_client` is the FastAPI
dependency every resource router uses to reach it.
"""
import os
import json
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore import Client as FirestoreClient

from app.core.config import settings
from app.core.exceptions import StorageFailure


def _load_cred_from_json_string(val: str):
    try:
        cred_dict = json.loads(val)
    except json.JSONDecodeError as e:
        raise ValueError(f"FIREBASE_CREDENTIALS_JSON does not contain valid JSON: {e}")
    if cred_dict.get("type") != "service_account":
        raise ValueError("Invalid service account certificate: 'type' field must be 'service_account'.")
    return credentials.Certificate(cred_dict)


def _credentials_from_settings(firebase_creds: str):
    # Inline JSON
    if firebase_creds.strip().startswith("{"):
        return _load_cred_from_json_string(firebase_creds)

    path = os.path.expanduser(firebase_creds)
    if os.path.isfile(path):
        return credentials.Certificate(path)
    raise ValueError(f"FIREBASE_CREDENTIALS_JSON value is neither a valid JSON nor a path to a file: {path}")


def initialize_firebase():
    """Initializes the Firebase Admin SDK using credentials from the settings or the environment.

    Raises a clear exception when credentials are missing or invalid so the deploy logs
    show an actionable message.
    """
    try:
        if firebase_admin._apps:
            logging.info("Firebase Admin SDK already initialized - skipping reinitialization")
            return

        logging.info("Initializing Firebase Admin SDK...")

        firebase_creds = settings.FIREBASE_CREDENTIALS_JSON

        # 1) If the settings value is provided
        if firebase_creds:
            firebase_admin.initialize_app(_credentials_from_settings(firebase_creds))
            logging.info("Firebase Admin SDK initialized successfully from FIREBASE_CREDENTIALS_JSON.")
            return

        # 2) Fallback to GOOGLE_APPLICATION_CREDENTIALS env var (path to file)
        gac = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
        if gac:
            path = os.path.expanduser(gac)
            if not os.path.isfile(path):
                raise ValueError(f"GOOGLE_APPLICATION_CREDENTIALS is set but the file was not found: {path}")
            firebase_admin.initialize_app(credentials.Certificate(path))
            logging.info("Firebase Admin SDK initialized successfully from GOOGLE_APPLICATION_CREDENTIALS.")
            return

        # 3) Nothing provided
        raise ValueError("Firebase credentials not provided. Set FIREBASE_CREDENTIALS_JSON (content or path) or GOOGLE_APPLICATION_CREDENTIALS (path).")

    except Exception as e:
        logging.error("CRITICAL: Failed to initialize Firebase Admin SDK: %s", e)
        raise


def get_firestore_client() -> FirestoreClient:
    """Returns the shared Firestore client. Firebase must be initialized first."""
    if not firebase_admin._apps:
        logging.error("FirebaseApp not initialized. Firestore client cannot be retrieved.")
        raise StorageFailure("Firebase is not initialized.")
    return firestore.client()
