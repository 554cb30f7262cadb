from ..schemas.contact import ContactSubmission, SanitizedContactData


FIRST_NAME_LENGTH = (2, 50)
MESSAGE_LENGTH = (10, 5000)

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }
)


def escape(text: str) -> str:
    # not idempotent: an already escaped "&lt;" becomes "&amp;lt;"
    return text.strip().translate(_HTML_ESCAPES)


def sanitize_contact_data(data: ContactSubmission) -> SanitizedContactData:
    return SanitizedContactData(
        first_name=escape(data.first_name),
        last_name=escape(data.last_name) if data.last_name else "",
        email=data.email.strip().lower(),
        message=escape(data.message),
    )


def validate_contact_data(data: ContactSubmission) -> list[str]:
    errors: list[str] = []

    if not data.first_name or not data.email or not data.message:
        errors.append("firstName, email, and message are required fields")

    if data.first_name and not FIRST_NAME_LENGTH[0] <= len(data.first_name) <= FIRST_NAME_LENGTH[1]:
        errors.append(f"First name must be between {FIRST_NAME_LENGTH[0]} and {FIRST_NAME_LENGTH[1]} characters")

    if data.message and len(data.message) < MESSAGE_LENGTH[0]:
        errors.append(f"Please provide a message with at least {MESSAGE_LENGTH[0]} characters")

    if data.message and len(data.message) > MESSAGE_LENGTH[1]:
        errors.append(f"Please keep your message under {MESSAGE_LENGTH[1]} characters")

    return errors
