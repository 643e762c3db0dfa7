"""Public models for the Freshlearn SDK."""

from freshlearn_sdk.models.members import (
    CompletedCourse,
    CreateMemberAndEnrollRequest,
    CreateMemberRequest,
    EnrollMemberRequest,
    EnrollProductBundleRequest,
    Member,
    UnenrollMemberRequest,
    UpdateMemberRequest,
)
from freshlearn_sdk.models.response import ApiResponse, RequestOptions

__all__ = [
    "ApiResponse",
    "RequestOptions",
    "Member",
    "CompletedCourse",
    "CreateMemberRequest",
    "UpdateMemberRequest",
    "EnrollMemberRequest",
    "CreateMemberAndEnrollRequest",
    "UnenrollMemberRequest",
    "EnrollProductBundleRequest",
]
