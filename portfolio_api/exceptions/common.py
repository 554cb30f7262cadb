from fastapi import status

from .api_exception import APIException


class InvalidJSONError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid JSON"
    description = "The request body contains invalid JSON format."


class InvalidRequestBodyError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request body"
    description = "The request body does not have the expected shape."


class TooManyRequestsError(APIException):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    detail = "Too many requests"
    description = "You have exceeded the rate limit. Please try again later."


class MaintenanceModeError(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Service unavailable"
    description = "The server is currently under maintenance. Please try again later."


class RouteNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Route not found"
    description = "The requested route does not exist on this server."


class InternalServerError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"
    description = "An unexpected error occurred"
