from fastapi import HTTPException, status

from handyhub.common.enums import ErrorCategory


class HandyHubException(HTTPException):
    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        category: ErrorCategory = ErrorCategory.INTERNAL,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.category = category


class NotFoundError(HandyHubException):
    def __init__(self, resource: str, resource_id: str | None = None):
        detail = f"{resource} not found"
        if resource_id:
            detail = f"{resource} '{resource_id}' not found"
        super().__init__(
            detail=detail,
            status_code=status.HTTP_404_NOT_FOUND,
            category=ErrorCategory.NOT_FOUND,
        )


class PermissionDeniedError(HandyHubException):
    def __init__(self, detail: str = "You do not have permission to perform this action"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_403_FORBIDDEN,
            category=ErrorCategory.FORBIDDEN,
        )


class BadRequestError(HandyHubException):
    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            category=ErrorCategory.INVALID_REQUEST,
        )


class ConflictError(HandyHubException):
    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_409_CONFLICT,
            category=ErrorCategory.CONFLICT,
        )
