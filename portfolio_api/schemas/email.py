from pydantic import BaseModel, Field

from ..utils.docs import example


class EmailValidationRequest(BaseModel):
    email: str | None = Field(None, description="Email address to validate")

    model_config = example(email="john.doe@gmail.com")


class EmailValidationResponse(BaseModel):
    is_valid: bool = Field(alias="isValid", description="Whether the email address would be accepted")
    message: str = Field(description="Reason for the rejection, or a confirmation")

    model_config = example(isValid=False, message="Did you mean user@gmail.com?")
