from pydantic import BaseModel, Field

from socialq.domain.people import InteractionType


class TextRequest(BaseModel):
    text: str


class LogInteractionRequest(BaseModel):
    text: str
    resolutions: dict[str, str] = {}
    type: InteractionType | None = None
    sentiment: int | None = Field(default=None, ge=1, le=5)
    create_unmatched: bool = True


class SentimentResponse(BaseModel):
    sentiment: int
