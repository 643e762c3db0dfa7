"""Pydantic models for Freshlearn member and enrollment payloads.

Attributes are snake_case; the wire format is camelCase (``fullName``,
``courseId``, ...). Models accept either spelling on input and are dumped
by alias when sent.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}

# =============================================================================
# Response Models
# =============================================================================


class Member(BaseModel):
    """Member record returned from the API."""

    id: str | None = None
    email: str
    full_name: str
    phone: str | None = None
    city: str | None = None
    source: str
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {**_WIRE_CONFIG, "extra": "allow"}


class CompletedCourse(BaseModel):
    """Course completion record for a member."""

    course_id: str
    course_name: str
    member_email: str
    member_name: str
    completed_at: str

    model_config = {**_WIRE_CONFIG, "extra": "allow"}


# =============================================================================
# Request Models
# =============================================================================


class CreateMemberRequest(BaseModel):
    """Payload for creating a member.

    Required fields:
        email, full_name, source

    Optional fields:
        phone, city
    """

    email: str
    full_name: str
    source: str
    phone: str | None = None
    city: str | None = None

    model_config = _WIRE_CONFIG


class UpdateMemberRequest(CreateMemberRequest):
    """Payload for updating a member, optionally addressed by id."""

    id: str | None = None


class EnrollMemberRequest(BaseModel):
    """Payload for enrolling an existing member into a course plan."""

    course_id: str
    plan_id: str
    member_email: str
    transaction_id: str
    source: str

    model_config = _WIRE_CONFIG


class CreateMemberAndEnrollRequest(BaseModel):
    """Payload for creating a member and enrolling them in one call."""

    email: str
    full_name: str
    source: str
    phone: str | None = None
    city: str | None = None
    course_id: str
    plan_id: str
    transaction_id: str

    model_config = _WIRE_CONFIG


class UnenrollMemberRequest(BaseModel):
    """Payload for removing a member from a course."""

    course_id: str
    member_email: str

    model_config = _WIRE_CONFIG


class EnrollProductBundleRequest(BaseModel):
    """Payload for enrolling a member into a product bundle."""

    product_bundle_id: str
    member_email: str
    transaction_id: str
    source: str

    model_config = _WIRE_CONFIG
