from fastapi import status

from .api_exception import APIException


class ValidationFailedError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Validation failed"
    description = "The contact form submission is incomplete or invalid."


class InvalidEmailAddressError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid email address"
    description = "The email address of the submission was rejected."


class TooManyContactSubmissionsError(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Too many contact form submissions"
    description = "Please wait before submitting another message. You can submit up to 3 messages per 15 minutes."


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Failed to send email"
    description = "An error occurred while processing your request. Please try again later."
