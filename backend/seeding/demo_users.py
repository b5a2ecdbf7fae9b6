import logging
from firebase_admin import auth

from backend.services.firebase_service import create_auth_user, write_user_profile

# Initialize logger
logger = logging.getLogger(__name__)

# ==============================================================================
# --- DEMO ACCOUNTS ---
# ==============================================================================

DEMO_USERS = [
    {
        "email": "student@putramate.com",
        "password": "Student123!",
        "displayName": "Demo Student",
        "role": "student"
    },
    {
        "email": "counsellor@putramate.com",
        "password": "Counsellor123!",
        "displayName": "Dr. Sarah Wong",
        "role": "counsellor"
    },
    {
        "email": "admin@putramate.com",
        "password": "Admin123!",
        "displayName": "Admin User",
        "role": "admin"
    }
]


def build_profile(uid, user_data):
    """Firestore profile document for a newly created Auth user."""
    return {
        "uid": uid,
        "email": user_data["email"],
        "displayName": user_data["displayName"],
        "role": user_data["role"],
        "photoUrl": None
    }


# ==============================================================================
# --- SEEDING ---
# ==============================================================================

def create_demo_users(auth_client, db, users=DEMO_USERS):
    """
    Creates an Auth account and a Firestore profile for every demo user.

    Auth failures are logged and the next user is processed. A failed
    profile write is not caught and stops the run.
    """
    result = {"created": [], "skipped": [], "failed": []}

    logger.info("Creating demo users...")

    for user_data in users:
        email = user_data["email"]
        try:
            user_record = create_auth_user(
                auth_client,
                email,
                user_data["password"],
                user_data["displayName"]
            )
        except auth.EmailAlreadyExistsError:
            logger.warning(f"User {email} already exists, skipping...")
            result["skipped"].append(email)
            continue
        except Exception as e:
            logger.error(f"Error creating {email}: {str(e)}")
            result["failed"].append(email)
            continue

        logger.info(f"Created Auth user: {email} ({user_record.uid})")

        write_user_profile(db, user_record.uid, build_profile(user_record.uid, user_data))
        logger.info(f"Created Firestore profile for {email}")
        result["created"].append(email)

    return result


def credentials_summary(users=DEMO_USERS):
    """Human-readable login reference for the demo accounts."""
    lines = ["=== Demo Users Created ==="]
    for user_data in users:
        lines.append(f"{user_data['role'].capitalize()}: {user_data['email']} / {user_data['password']}")
    lines.append("")
    lines.append("You can now login with these credentials.")
    return "\n".join(lines)
