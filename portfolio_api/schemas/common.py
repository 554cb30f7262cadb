from pydantic import BaseModel

from ..utils.docs import example


class HealthResponse(BaseModel):
    message: str
    status: str
    timestamp: str

    model_config = example(
        message="Portfolio Backend Server is running!", status="healthy", timestamp="2024-05-01T12:00:00+00:00"
    )
