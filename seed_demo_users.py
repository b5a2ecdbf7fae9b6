import os
import sys
import logging
from dotenv import load_dotenv

# --- Load Environment Variables ---
load_dotenv()

from backend.services.firebase_service import init_firebase
from backend.seeding.demo_users import create_demo_users, credentials_summary

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def get_credentials_path():
    """Service account path from FIREBASE_CREDENTIALS_PATH, relative to this folder."""
    cred_path = os.getenv('FIREBASE_CREDENTIALS_PATH', 'serviceAccountKey.json')
    return os.path.join(BASE_DIR, cred_path)


def main():
    try:
        auth_client, db = init_firebase(get_credentials_path())
        create_demo_users(auth_client, db)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1

    print()
    print(credentials_summary())
    return 0


# --- Main Execution ---
if __name__ == '__main__':
    sys.exit(main())
