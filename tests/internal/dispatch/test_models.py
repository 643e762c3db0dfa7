"""Tests for the dispatch request descriptor and wire models."""

import pytest
from pydantic import ValidationError

from freshlearn_sdk._internal.dispatch.models import DispatchRequest
from freshlearn_sdk.models import (
    CompletedCourse,
    CreateMemberAndEnrollRequest,
    CreateMemberRequest,
    EnrollProductBundleRequest,
    Member,
    RequestOptions,
    UpdateMemberRequest,
)


class TestDispatchRequest:
    """Tests for DispatchRequest model."""

    def test_timeout_seconds(self):
        """Should convert milliseconds to seconds."""
        request = DispatchRequest(method="GET", url="http://test/x", headers={}, timeout_ms=1500)
        assert request.timeout_seconds == 1.5

    def test_no_timeout(self):
        """Should report no timeout when none was set."""
        request = DispatchRequest(method="GET", url="http://test/x", headers={})
        assert request.timeout_seconds is None
        assert request.content is None

    def test_is_frozen(self):
        """Should not allow mutation after construction."""
        request = DispatchRequest(method="GET", url="http://test/x", headers={})
        with pytest.raises(ValidationError):
            request.method = "POST"  # type: ignore[misc]


class TestMember:
    """Tests for Member model."""

    def test_parses_camel_case(self):
        """Should read camelCase wire fields."""
        member = Member.model_validate(
            {
                "id": "1",
                "email": "test@example.com",
                "fullName": "Test User",
                "source": "api",
                "createdAt": "2024-01-01T00:00:00Z",
            }
        )
        assert member.full_name == "Test User"
        assert member.created_at == "2024-01-01T00:00:00Z"
        assert member.phone is None

    def test_keeps_unknown_fields(self):
        """Should keep extra server attributes."""
        member = Member.model_validate(
            {"email": "a@b.c", "fullName": "A", "source": "api", "tags": ["x"]}
        )
        assert member.model_dump(by_alias=True)["tags"] == ["x"]

    def test_requires_email(self):
        """Should reject a record without email."""
        with pytest.raises(ValidationError):
            Member.model_validate({"fullName": "A", "source": "api"})


class TestCompletedCourse:
    """Tests for CompletedCourse model."""

    def test_parses_camel_case(self):
        course = CompletedCourse.model_validate(
            {
                "courseId": "course-123",
                "courseName": "Test Course",
                "memberEmail": "student@example.com",
                "memberName": "Student Name",
                "completedAt": "2024-01-01T00:00:00Z",
            }
        )
        assert course.course_id == "course-123"
        assert course.member_name == "Student Name"


class TestRequestModels:
    """Tests for request payload models."""

    def test_create_member_dumps_wire_names(self):
        """Should dump by alias and omit unset optional fields."""
        request = CreateMemberRequest(email="new@example.com", full_name="New User", source="api")
        assert request.model_dump(by_alias=True, exclude_none=True) == {
            "email": "new@example.com",
            "fullName": "New User",
            "source": "api",
        }

    def test_accepts_wire_names(self):
        """Should populate from camelCase input too."""
        request = CreateMemberRequest.model_validate(
            {"email": "a@b.c", "fullName": "A", "source": "api"}
        )
        assert request.full_name == "A"

    def test_update_member_adds_id(self):
        """UpdateMemberRequest should extend CreateMemberRequest with id."""
        request = UpdateMemberRequest(id="123", email="a@b.c", full_name="A", source="api")
        assert isinstance(request, CreateMemberRequest)
        assert request.model_dump(by_alias=True, exclude_none=True)["id"] == "123"

    def test_create_member_and_enroll_requires_plan(self):
        """Should reject a payload missing enrollment fields."""
        with pytest.raises(ValidationError):
            CreateMemberAndEnrollRequest(
                email="a@b.c", full_name="A", source="api", course_id="c", transaction_id="t"
            )  # type: ignore[call-arg]

    def test_product_bundle_wire_names(self):
        request = EnrollProductBundleRequest(
            product_bundle_id="bundle-123",
            member_email="member@example.com",
            transaction_id="txn-789",
            source="api",
        )
        assert list(request.model_dump(by_alias=True)) == [
            "productBundleId",
            "memberEmail",
            "transactionId",
            "source",
        ]


class TestRequestOptions:
    """Tests for RequestOptions model."""

    def test_defaults(self):
        options = RequestOptions()
        assert options.headers is None
        assert options.timeout is None
