"""Core constants: function names, limits and user-facing messages.

Single source of truth for literals shared by handlers, routes and tests.
"""

# Public function names (kept identical to the deployed mobile client contract)
FUNCTION_CREATE_USER_AND_PROFILE = "createUserAndProfile"
FUNCTION_DELETE_AUTH_ON_PROFILE_DELETE = "deleteUserAuthOnProfileDelete"

# Identity provider rejects shorter passwords too; we fail fast before calling it.
MIN_PASSWORD_LENGTH = 6

# Required request fields, in the order they are reported when missing
REQUIRED_ACCOUNT_FIELDS = ("email", "password", "name", "department", "role")

# Custom claim key set on every provisioned account
ROLE_CLAIM = "role"

MSG_UNAUTHENTICATED = (
    "Authentication required. Only authenticated users can call this function."
)
MSG_MISSING_FIELDS = (
    "Required data (email, password, name, department, role) is missing."
)
MSG_PASSWORD_TOO_SHORT = (
    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
)
MSG_EMAIL_ALREADY_REGISTERED = "This email is already registered."
MSG_PASSWORD_TOO_WEAK = "The password is too weak."
MSG_CREATE_USER_FAILED = "An error occurred while creating the user."
MSG_USER_CREATED = "User created successfully."

# Firestore event types delivered when a document is deleted
FIRESTORE_DOCUMENT_DELETED = "google.cloud.firestore.document.v1.deleted"
FIRESTORE_DOCUMENT_DELETED_WITH_AUTH = f"{FIRESTORE_DOCUMENT_DELETED}.withAuthContext"
FIRESTORE_DELETE_EVENT_TYPES = frozenset(
    {FIRESTORE_DOCUMENT_DELETED, FIRESTORE_DOCUMENT_DELETED_WITH_AUTH}
)
