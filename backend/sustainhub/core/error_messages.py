# sustainhub/core/error_messages.py
from fastapi import HTTPException, status

ERROR_CODES = {
    400: "VALIDATION_ERROR",
    401: "UNAUTHENTICATED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_SERVER_ERROR",
}


class ErrorResponses:
    UNAUTHENTICATED = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED, detail="Please login (10001)"
    )
    INVALID_TOKEN = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid session token"
    )
    ADMIN_ONLY = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required"
    )
    NOT_AUTHORIZED = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
    )
    CART_EMPTY = HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Cart is empty"
    )

    @staticmethod
    def not_found(what: str) -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")

    @staticmethod
    def internal(message: str) -> HTTPException:
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)

    @staticmethod
    def validation(message: str) -> HTTPException:
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=message)


def error_code(status_code: int) -> str:
    if status_code in ERROR_CODES:
        return ERROR_CODES[status_code]
    return "INTERNAL_SERVER_ERROR" if status_code >= 500 else "BAD_REQUEST"
