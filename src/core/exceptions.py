"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    MEMBER_TYPE_NOT_FOUND = "MEMBER_TYPE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (400)
    PROFILE_ALREADY_EXISTS = "PROFILE_ALREADY_EXISTS"

    # Subscription errors (400)
    SELF_SUBSCRIPTION = "SELF_SUBSCRIPTION"
    ALREADY_SUBSCRIBED = "ALREADY_SUBSCRIBED"
    NOT_SUBSCRIBED = "NOT_SUBSCRIBED"

    # Precondition errors (412)
    CASCADE_FAILED = "CASCADE_FAILED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """A referenced record does not exist."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class ValidationFailureError(AppException):
    """Structurally malformed payload (missing or unknown fields)."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=details,
        )


class ConflictError(AppException):
    """A uniqueness rule would be violated."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class BadRequestError(AppException):
    """A semantic rule was violated."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class PreconditionFailedError(AppException):
    """A store mutation unexpectedly failed part-way through an operation."""

    def __init__(self, error_code: ErrorCode, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=412,
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"The user with id {user_id} not found.",
            details={"user_id": user_id},
        )


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"The profile with id {profile_id} not found.",
            details={"profile_id": profile_id},
        )


class PostNotFoundError(NotFoundError):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"The post with id {post_id} not found.",
            details={"post_id": post_id},
        )


class MemberTypeNotFoundError(NotFoundError):
    """Member type not found."""

    def __init__(self, member_type_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MEMBER_TYPE_NOT_FOUND,
            message=f"The member type with id {member_type_id} not found.",
            details={"member_type_id": member_type_id},
        )


class ProfileAlreadyExistsError(ConflictError):
    """The user already owns a profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_ALREADY_EXISTS,
            message=f"The user with id {user_id} already has a profile.",
            details={"user_id": user_id},
        )


class SelfSubscriptionError(BadRequestError):
    """A user tried to subscribe to itself."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SELF_SUBSCRIPTION,
            message="The user can't be subscribed to itself.",
            details={"user_id": user_id},
        )


class AlreadySubscribedError(BadRequestError):
    """The follower is already subscribed to the target."""

    def __init__(self, follower_id: str, target_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_SUBSCRIBED,
            message=(
                f"The user with id {follower_id} is already subscribed "
                f"to the user with id {target_id}."
            ),
            details={"follower_id": follower_id, "target_id": target_id},
        )


class NotSubscribedError(BadRequestError):
    """The follower is not subscribed to the target."""

    def __init__(self, follower_id: str, target_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_SUBSCRIBED,
            message=(
                f"The user with id {follower_id} is already unsubscribed "
                f"from the user with id {target_id}."
            ),
            details={"follower_id": follower_id, "target_id": target_id},
        )


class CascadeStepFailedError(PreconditionFailedError):
    """One step of the user delete cascade failed."""

    def __init__(self, user_id: str, step: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.CASCADE_FAILED,
            message=f"User delete error: {step} step failed.",
            details={"user_id": user_id, "step": step, **(details or {})},
        )
        self.step = step
