"""Endpoints for email address validation"""

from typing import Any

from fastapi import APIRouter

from ..exceptions.common import TooManyRequestsError
from ..exceptions.email import MissingEmailError
from ..schemas.email import EmailValidationRequest, EmailValidationResponse
from ..utils.docs import responses
from ..utils.email_validation import validate_email


router = APIRouter(tags=["email"])


@router.post("/email/validate", responses=responses(EmailValidationResponse, MissingEmailError, TooManyRequestsError))
async def validate(data: EmailValidationRequest) -> Any:
    """
    Check whether an email address would be accepted by the contact form.

    The address is trimmed and lower-cased before validation. No DNS lookups are performed.
    """

    if not data.email:
        raise MissingEmailError

    result = validate_email(data.email.strip().lower())
    return {"isValid": result.is_valid, "message": result.error or "Email is valid"}
