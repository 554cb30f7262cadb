from pydantic import BaseModel, Field

from ..utils.docs import example


class ContactSubmission(BaseModel):
    first_name: str = Field("", alias="firstName", description="First name of the sender")
    last_name: str | None = Field(None, alias="lastName", description="Last name of the sender")
    email: str = Field("", description="Email address of the sender")
    message: str = Field("", description="Content of the message")

    model_config = example(
        firstName="John",
        lastName="Doe",
        email="john.doe@gmail.com",
        message="Hi, I really like your portfolio and would love to talk about a project.",
    )


class SanitizedContactData(BaseModel):
    first_name: str
    last_name: str
    email: str
    message: str

    model_config = {"frozen": True}


class ContactResponse(BaseModel):
    success: bool = Field(description="Whether the message has been sent")
    message: str = Field(description="Human readable result")

    model_config = example(success=True, message="Email sent successfully! Thank you for your message.")
