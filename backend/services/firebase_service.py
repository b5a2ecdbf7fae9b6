import os
import logging
import firebase_admin
from firebase_admin import credentials, firestore, auth

# Initialize logger
logger = logging.getLogger(__name__)

# Collection holding one profile document per Auth user
USERS_COLLECTION = 'users'


class FirebaseInitError(Exception):
    """Raised when the service account cannot be loaded or the app fails to start."""


# --------------------------------------------------------------------------
# Initialization
# --------------------------------------------------------------------------
def init_firebase(cred_path):
    """
    Initializes the default Firebase app from a service account file.
    Returns the auth module and a Firestore client.
    """
    if not os.path.isfile(cred_path):
        raise FirebaseInitError(f"Service account file not found: {cred_path}")

    try:
        if not firebase_admin._apps:
            cred = credentials.Certificate(cred_path)
            firebase_admin.initialize_app(cred)
        db = firestore.client()
    except (ValueError, IOError) as e:
        raise FirebaseInitError(f"Invalid service account file {cred_path}: {e}") from e

    logger.info("Firebase connection successful.")
    return auth, db


# --- Auth & Firestore helpers ---
def create_auth_user(auth_client, email, password, display_name):
    """Creates a pre-verified Firebase Auth user and returns its UserRecord."""
    return auth_client.create_user(
        email=email,
        password=password,
        display_name=display_name,
        email_verified=True
    )


def write_user_profile(db, uid, profile):
    """Writes (create or replace) the profile document for a user."""
    db.collection(USERS_COLLECTION).document(uid).set(profile)
