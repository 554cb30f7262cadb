from typing import Any

from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base class for every error this service reports to a client.

    `detail` becomes the `error` field of the response body and `description` the default `message`.
    """

    status_code: int
    detail: str
    description: str

    def __init__(
        self, message: str | None = None, *, headers: dict[str, str] | None = None, **extra: Any
    ) -> None:
        super().__init__(self.status_code, self.detail, headers)
        self.message = message or self.description
        self.extra = extra

    @property
    def payload(self) -> dict[str, Any]:
        return {"error": self.detail, "message": self.message, **self.extra}
