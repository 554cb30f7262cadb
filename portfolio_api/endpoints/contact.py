"""Endpoints for the contact form"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..exceptions.common import TooManyRequestsError
from ..exceptions.contact import (
    CouldNotSendMessageError,
    InvalidEmailAddressError,
    TooManyContactSubmissionsError,
    ValidationFailedError,
)
from ..guards import contact_rate_limit
from ..logger import get_logger
from ..schemas.contact import ContactResponse, ContactSubmission
from ..utils.docs import responses
from ..utils.email import ContactMailer, MailTransportError
from ..utils.email_validation import validate_email
from ..utils.sanitizer import sanitize_contact_data, validate_contact_data


router = APIRouter(tags=["contact"])

logger = get_logger(__name__)


@router.post(
    "/contact",
    dependencies=[Depends(contact_rate_limit)],
    responses=responses(
        ContactResponse,
        ValidationFailedError,
        InvalidEmailAddressError,
        TooManyContactSubmissionsError,
        TooManyRequestsError,
        CouldNotSendMessageError,
    ),
)
async def send_message(data: ContactSubmission, request: Request) -> Any:
    """
    Send a contact form submission to the owner of the portfolio.

    `firstName` (2-50 characters), `email` and `message` (10-5000 characters) are required.
    Disposable email addresses and addresses with common domain typos are rejected.

    *Rate limit:* 3 submissions per 15 minutes per client.
    """

    if errors := validate_contact_data(data):
        raise ValidationFailedError(", ".join(errors))

    sanitized = sanitize_contact_data(data)

    validation = validate_email(sanitized.email)
    if not validation.is_valid:
        raise InvalidEmailAddressError(validation.error)

    mailer: ContactMailer = request.app.state.mailer
    try:
        await mailer.send(sanitized)
    except MailTransportError:
        logger.exception(f"Could not send contact message from {sanitized.email}")
        raise CouldNotSendMessageError

    return {"success": True, "message": "Email sent successfully! Thank you for your message."}
