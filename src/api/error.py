from fastapi import status
from src.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


# Domain error code -> HTTP status for expected failures
CLIENT_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_CONTENT,
    "PASSWORD_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "DUPLICATE_USER": status.HTTP_409_CONFLICT,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_CODE": status.HTTP_400_BAD_REQUEST,
    "EXPIRED_CODE": status.HTTP_410_GONE,
}

SERVER_ERROR_STATUS = {
    "TRANSIENT_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def raise_for_error(error: Error):
    """Turn a use case Error into the matching HTTP exception"""
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    raise ServerError(
        error,
        status_code=SERVER_ERROR_STATUS.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        ),
    )
