import pytest

from portfolio_api.schemas.contact import ContactSubmission, SanitizedContactData
from portfolio_api.utils.sanitizer import escape, sanitize_contact_data, validate_contact_data


REQUIRED = "firstName, email, and message are required fields"
FIRST_NAME = "First name must be between 2 and 50 characters"
MESSAGE_TOO_SHORT = "Please provide a message with at least 10 characters"
MESSAGE_TOO_LONG = "Please keep your message under 5000 characters"


def submission(**kwargs: str | None) -> ContactSubmission:
    data = {"firstName": "John", "lastName": "Doe", "email": "john@example.com", "message": "Valid message here."}
    return ContactSubmission.model_validate({**data, **kwargs})


@pytest.mark.parametrize(
    "text,expected",
    [
        ("plain text", "plain text"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ("&", "&amp;"),
        ("'", "&#x27;"),
        ('"', "&quot;"),
        ("/", "&#x2F;"),
        ("  <b>bold</b>  ", "&lt;b&gt;bold&lt;&#x2F;b&gt;"),
        ("Tom & Jerry's \"show\"", "Tom &amp; Jerry&#x27;s &quot;show&quot;"),
    ],
)
def test__escape(text: str, expected: str) -> None:
    assert escape(text) == expected


def test__escape__twice_double_escapes() -> None:
    assert escape(escape("<")) == "&amp;lt;"


def test__sanitize_contact_data() -> None:
    data = submission(
        firstName="  John<script>  ",
        lastName="  Doe<img>  ",
        email="  JOHN.DOE@GMAIL.COM  ",
        message="  Hello <b>World</b>!  ",
    )

    assert sanitize_contact_data(data) == SanitizedContactData(
        first_name="John&lt;script&gt;",
        last_name="Doe&lt;img&gt;",
        email="john.doe@gmail.com",
        message="Hello &lt;b&gt;World&lt;&#x2F;b&gt;!",
    )


@pytest.mark.parametrize("last_name", [None, ""])
def test__sanitize_contact_data__without_last_name(last_name: str | None) -> None:
    result = sanitize_contact_data(submission(lastName=last_name, message="Hello!"))

    assert result.first_name == "John"
    assert result.last_name == ""
    assert result.message == "Hello!"


def test__sanitize_contact_data__email_not_escaped() -> None:
    assert sanitize_contact_data(submission(email=" O'Brien/Sales@Example.com ")).email == "o'brien/sales@example.com"


def test__validate_contact_data__valid() -> None:
    assert validate_contact_data(submission()) == []


@pytest.mark.parametrize(
    "kwargs,expected",
    [
        ({"firstName": "", "email": "", "message": ""}, [REQUIRED]),
        ({"firstName": ""}, [REQUIRED]),
        ({"email": ""}, [REQUIRED]),
        ({"message": ""}, [REQUIRED]),
        ({"firstName": "J"}, [FIRST_NAME]),
        ({"firstName": "J" * 51}, [FIRST_NAME]),
        ({"message": "Short"}, [MESSAGE_TOO_SHORT]),
        ({"message": "A" * 5001}, [MESSAGE_TOO_LONG]),
        ({"firstName": "J", "message": "Short"}, [FIRST_NAME, MESSAGE_TOO_SHORT]),
        ({"firstName": "", "message": "Short"}, [REQUIRED, MESSAGE_TOO_SHORT]),
    ],
)
def test__validate_contact_data__invalid(kwargs: dict[str, str], expected: list[str]) -> None:
    assert validate_contact_data(submission(**kwargs)) == expected


@pytest.mark.parametrize(
    "first_name,message",
    [("Jo", "A" * 10), ("J" * 50, "A" * 5000), ("Jo", "A" * 5000), ("J" * 50, "A" * 10)],
)
def test__validate_contact_data__boundaries(first_name: str, message: str) -> None:
    assert validate_contact_data(submission(firstName=first_name, message=message)) == []


def test__validate_contact_data__missing_fields() -> None:
    assert validate_contact_data(ContactSubmission.model_validate({})) == [REQUIRED]
