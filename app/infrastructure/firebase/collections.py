"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. The users collection is shared with the
mobile app and with the delete trigger: document id == account uid.
"""

import re

COLLECTION_USERS = "users"

# Matches a users/{userId} document path (no subcollections).
USER_DOCUMENT_PATH = re.compile(rf"^{COLLECTION_USERS}/(?P<user_id>[^/]+)$")

# Full resource name; only the database prefix is stripped.
_RESOURCE_NAME = re.compile(r"^projects/[^/]+/databases/[^/]+/documents/(?P<path>.+)$")


def relative_document_path(raw: str) -> str:
    """Strip resource-name prefixes down to a database-relative path.

    Accepts "users/u1", "documents/users/u1" (CloudEvent subject) and
    "projects/p/databases/(default)/documents/users/u1". Document ids may
    themselves be "documents", so only a leading prefix is removed, once.
    """
    path = raw.strip().strip("/")
    match = _RESOURCE_NAME.match(path)
    if match:
        return match.group("path")
    if path.startswith("documents/"):
        return path[len("documents/"):]
    return path


def user_id_from_document_path(raw: str | None) -> str | None:
    """Return userId for a users/{userId} document path, else None."""
    if not raw:
        return None
    match = USER_DOCUMENT_PATH.match(relative_document_path(raw))
    return match.group("user_id") if match else None
