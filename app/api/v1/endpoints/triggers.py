"""Firestore document triggers delivered as CloudEvents over HTTP.

A 2xx response acknowledges the event; 5xx lets the event system redeliver.
"""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from app.api.v1.dependencies import get_profile_deletion_watcher
from app.application.services import ProfileDeletionWatcher
from app.core.constants import (
    FIRESTORE_DELETE_EVENT_TYPES,
    FUNCTION_DELETE_AUTH_ON_PROFILE_DELETE,
)
from app.domain.exceptions import InvalidArgumentException
from app.infrastructure.firebase.collections import user_id_from_document_path
from app.schemas.callable import CallableErrorResponse
from app.schemas.events import DocumentEvent, StructuredCloudEvent

logger = logging.getLogger(__name__)

router = APIRouter()

STRUCTURED_CONTENT_TYPE = "application/cloudevents+json"


async def _read_event(request: Request) -> DocumentEvent:
    """Extract event attributes from a structured or binary-mode CloudEvent."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(STRUCTURED_CONTENT_TYPE):
        try:
            event = StructuredCloudEvent.model_validate(json.loads(await request.body()))
        except (ValueError, ValidationError) as e:
            raise InvalidArgumentException("Malformed CloudEvent body") from e
        return DocumentEvent(
            event_id=event.id,
            event_type=event.type,
            document_path=event.document or event.subject,
        )
    headers = request.headers
    return DocumentEvent(
        event_id=headers.get("ce-id"),
        event_type=headers.get("ce-type"),
        document_path=headers.get("ce-document") or headers.get("ce-subject"),
    )


@router.post(
    f"/{FUNCTION_DELETE_AUTH_ON_PROFILE_DELETE}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"model": CallableErrorResponse, "description": "Not a users/{userId} event"},
        500: {"model": CallableErrorResponse, "description": "Auth deletion failed"},
    },
)
async def delete_user_auth_on_profile_delete(
    request: Request,
    watcher: Annotated[ProfileDeletionWatcher, Depends(get_profile_deletion_watcher)],
) -> Response:
    """Delete the Auth account of a deleted users/{userId} document."""
    event = await _read_event(request)
    if event.event_type and event.event_type not in FIRESTORE_DELETE_EVENT_TYPES:
        logger.warning("Ignoring event %s of type %s", event.event_id, event.event_type)
        return Response(status_code=204)

    user_id = user_id_from_document_path(event.document_path)
    if user_id is None:
        raise InvalidArgumentException(
            f"Event document is not a users/{{userId}} path: {event.document_path!r}",
            field="document",
        )
    await watcher.on_profile_deleted(user_id=user_id)
    return Response(status_code=204)
