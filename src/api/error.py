from typing import Dict, Mapping, NoReturn, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error codes shared by every resource router
COMMON_STATUS_BY_CODE = {
    "OWNERSHIP_MISMATCH": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "POST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "COMMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error, status_by_code: Mapping[str, int] = COMMON_STATUS_BY_CODE) -> NoReturn:
    """Raise ClientError for known error codes, ServerError for anything else"""
    status_code = status_by_code.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
