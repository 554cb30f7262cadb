from fastapi import status

from .api_exception import APIException


class MissingEmailError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Missing email"
    description = "Please provide an email address to validate"
