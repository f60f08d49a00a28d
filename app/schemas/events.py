"""CloudEvent schemas for Firestore document triggers.

Binary mode carries attributes in ce-* headers and the (protobuf) document
in the body; structured mode carries everything in a JSON body. Only the
event type and document path are needed here, so the body payload is never
decoded.
"""

from pydantic import BaseModel, ConfigDict


class StructuredCloudEvent(BaseModel):
    """application/cloudevents+json body (attributes only)."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    source: str | None = None
    type: str | None = None
    subject: str | None = None
    document: str | None = None


class DocumentEvent(BaseModel):
    """Event attributes the trigger route works with."""

    event_id: str | None = None
    event_type: str | None = None
    document_path: str | None = None
