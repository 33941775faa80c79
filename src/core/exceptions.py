"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes, logged server-side only."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors
    FORBIDDEN = "FORBIDDEN"

    # Not found errors
    POST_NOT_FOUND = "POST_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    NO_PROFILE = "NO_PROFILE"
    MALFORMED_ID = "MALFORMED_ID"
    GITHUB_PROFILE_NOT_FOUND = "GITHUB_PROFILE_NOT_FOUND"

    # Validation / domain state errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Conflict errors (409)
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORE_FAILURE = "STORE_FAILURE"


class AppException(Exception):
    """Base application exception.

    ``as_errors_list`` renders the message inside an ``errors`` array
    instead of a top-level ``msg``, matching the registration/login
    responses clients already parse.
    """

    as_errors_list: bool = False

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


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "No token,auth denied",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class InvalidTokenError(Exception):
    """A token failed structural, signature or expiry checks."""


class ForbiddenError(AppException):
    """Identity does not own the resource it tries to mutate.

    Reported as 400 rather than 403, which is what existing clients expect.
    """

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=400,
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message="Post not found",
            status_code=404,
            details={"post_id": post_id},
        )


class ProfileNotFoundError(AppException):
    """Profile looked up by user id does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message="Profile not found",
            status_code=400,
            details={"user_id": user_id},
        )


class NoProfileError(AppException):
    """The authenticated user has not created a profile yet."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NO_PROFILE,
            message="There is no profile for this user",
            status_code=400,
            details={"user_id": user_id},
        )


class MalformedIdError(AppException):
    """Identifier is not in the store's format.

    Carries the same status and message as the not-found error of the
    resource kind so clients cannot tell the two apart.
    """

    def __init__(self, not_found: AppException, raw_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MALFORMED_ID,
            message=not_found.message,
            status_code=not_found.status_code,
            details={"raw_id": raw_id, "kind": not_found.error_code.value},
        )


class AlreadyLikedError(AppException):
    """User already likes the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_LIKED,
            message="Post already liked",
            status_code=400,
            details={"post_id": post_id},
        )


class NotLikedError(AppException):
    """User has not liked the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LIKED,
            message="Post not liked",
            status_code=400,
            details={"post_id": post_id},
        )


class UserAlreadyExistsError(AppException):
    """Email is already registered."""

    as_errors_list = True

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_ALREADY_EXISTS,
            message="user already exists",
            status_code=400,
            details={"email": email},
        )


class InvalidCredentialsError(AppException):
    """Email/password pair does not match."""

    as_errors_list = True

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid Credentials",
            status_code=400,
        )


class GithubProfileNotFoundError(AppException):
    """GitHub did not return repositories for the username."""

    def __init__(self, username: str) -> None:
        super().__init__(
            error_code=ErrorCode.GITHUB_PROFILE_NOT_FOUND,
            message="No github account for this username",
            status_code=404,
            details={"username": username},
        )


class StoreFailureError(AppException):
    """Backing store raised an error."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.STORE_FAILURE,
            message="Server error",
            status_code=500,
            details={"detail": detail} if detail else None,
        )


class ConcurrentUpdateError(AppException):
    """Another request updated the same document first."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.CONCURRENT_UPDATE,
            message="Resource was modified concurrently, retry",
            status_code=409,
        )
