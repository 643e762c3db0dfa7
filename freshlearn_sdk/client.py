"""User-facing clients for the Freshlearn integration API.

Example usage:
    from freshlearn_sdk import FreshlearnClient
    from freshlearn_sdk.models import CreateMemberRequest

    client = FreshlearnClient(api_key="your-api-key")

    result = client.create_member(
        CreateMemberRequest(email="new@example.com", full_name="New User", source="api")
    )
    if result.success:
        print(result.data.id)
    else:
        print(result.error)
"""

from collections.abc import Mapping
from typing import Any, Self

from freshlearn_sdk._internal.dispatch import RequestDispatcher
from freshlearn_sdk.config import FreshlearnConfig
from freshlearn_sdk.models import (
    ApiResponse,
    CompletedCourse,
    CreateMemberAndEnrollRequest,
    CreateMemberRequest,
    EnrollMemberRequest,
    EnrollProductBundleRequest,
    Member,
    RequestOptions,
    UnenrollMemberRequest,
    UpdateMemberRequest,
)

MEMBERS_PATH = "/integration/member"
UPDATE_MEMBER_PATH = "/integration/member/update"
ENROLL_MEMBER_PATH = "/integration/member/enroll"
COMPLETED_COURSES_PATH = "/integration/member/completed-courses"
CREATE_MEMBER_AND_ENROLL_PATH = "/integration/member/createMemberAndEnroll"
UNENROLL_MEMBER_PATH = "/integration/member/unenroll/course"
ENROLL_PRODUCT_BUNDLE_PATH = "/integration/member/enroll/productBundle"


class _BaseClient:
    """Configuration shared by the blocking and async clients."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Freshlearn integration API key. Must not be empty.
            base_url: API origin. Defaults to https://api.freshlearn.com/v1.
            debug: Enable debug logging to stderr.

        Raises:
            FreshlearnConfigError: If api_key is empty.
        """
        self._config = FreshlearnConfig(
            api_key=api_key,
            base_url=base_url,  # type: ignore[arg-type]
            debug=debug,
        )
        self._dispatcher = RequestDispatcher(self._config)

    @classmethod
    def from_env(cls) -> Self:
        """Create a client from FRESHLEARN_* environment variables.

        See FreshlearnConfig.from_env() for the variables read.

        Raises:
            FreshlearnConfigError: If FRESHLEARN_API_KEY is missing or empty.
        """
        config = FreshlearnConfig.from_env()
        return cls(config.api_key, base_url=config.base_url, debug=config.debug)

    @property
    def config(self) -> FreshlearnConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url


class FreshlearnClient(_BaseClient):
    """Blocking client for the Freshlearn integration API.

    Every method returns an ApiResponse envelope. Non-2xx responses are
    reported with success=False and never raise. Connection errors raise
    httpx exceptions; a per-call timeout covers the whole call and raises
    httpx.TimeoutException when it expires.
    """

    def get_members(self, options: RequestOptions | None = None) -> ApiResponse[list[Member]]:
        """List all members."""
        return self._dispatcher.dispatch("GET", MEMBERS_PATH, None, options, cast_to=list[Member])

    def create_member(
        self,
        member: CreateMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Member]:
        """Create a member.

        Args:
            member: Member fields, as a model or a camelCase mapping.
            options: Optional per-call headers and timeout.

        Returns:
            Envelope with the created Member on success.
        """
        return self._dispatcher.dispatch("POST", MEMBERS_PATH, member, options, cast_to=Member)

    def update_member(
        self,
        member: UpdateMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Member]:
        """Update a member."""
        return self._dispatcher.dispatch("PUT", UPDATE_MEMBER_PATH, member, options, cast_to=Member)

    def enroll_member(
        self,
        enrollment: EnrollMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        """Enroll an existing member into a course plan."""
        return self._dispatcher.dispatch("POST", ENROLL_MEMBER_PATH, enrollment, options)

    def get_completed_courses(
        self, options: RequestOptions | None = None
    ) -> ApiResponse[list[CompletedCourse]]:
        """List course completions across members."""
        return self._dispatcher.dispatch(
            "GET", COMPLETED_COURSES_PATH, None, options, cast_to=list[CompletedCourse]
        )

    def create_member_and_enroll(
        self,
        data: CreateMemberAndEnrollRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        """Create a member and enroll them into a course plan in one call."""
        return self._dispatcher.dispatch("POST", CREATE_MEMBER_AND_ENROLL_PATH, data, options)

    def unenroll_member(
        self,
        data: UnenrollMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        """Remove a member from a course."""
        return self._dispatcher.dispatch("POST", UNENROLL_MEMBER_PATH, data, options)

    def enroll_product_bundle(
        self,
        data: EnrollProductBundleRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        """Enroll a member into every course of a product bundle."""
        return self._dispatcher.dispatch("POST", ENROLL_PRODUCT_BUNDLE_PATH, data, options)


class AsyncFreshlearnClient(_BaseClient):
    """Async client for the Freshlearn integration API.

    Same operations as FreshlearnClient. A per-call timeout raises
    httpx.TimeoutException when it expires, as in the blocking client; it
    does not affect other in-flight calls.
    """

    async def get_members(self, options: RequestOptions | None = None) -> ApiResponse[list[Member]]:
        return await self._dispatcher.adispatch(
            "GET", MEMBERS_PATH, None, options, cast_to=list[Member]
        )

    async def create_member(
        self,
        member: CreateMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Member]:
        return await self._dispatcher.adispatch(
            "POST", MEMBERS_PATH, member, options, cast_to=Member
        )

    async def update_member(
        self,
        member: UpdateMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Member]:
        return await self._dispatcher.adispatch(
            "PUT", UPDATE_MEMBER_PATH, member, options, cast_to=Member
        )

    async def enroll_member(
        self,
        enrollment: EnrollMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        return await self._dispatcher.adispatch("POST", ENROLL_MEMBER_PATH, enrollment, options)

    async def get_completed_courses(
        self, options: RequestOptions | None = None
    ) -> ApiResponse[list[CompletedCourse]]:
        return await self._dispatcher.adispatch(
            "GET", COMPLETED_COURSES_PATH, None, options, cast_to=list[CompletedCourse]
        )

    async def create_member_and_enroll(
        self,
        data: CreateMemberAndEnrollRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        return await self._dispatcher.adispatch(
            "POST", CREATE_MEMBER_AND_ENROLL_PATH, data, options
        )

    async def unenroll_member(
        self,
        data: UnenrollMemberRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        return await self._dispatcher.adispatch("POST", UNENROLL_MEMBER_PATH, data, options)

    async def enroll_product_bundle(
        self,
        data: EnrollProductBundleRequest | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> ApiResponse[Any]:
        return await self._dispatcher.adispatch(
            "POST", ENROLL_PRODUCT_BUNDLE_PATH, data, options
        )
