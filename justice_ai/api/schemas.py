from pydantic import BaseModel, Field

from justice_ai.core.constants import Language


class AdviceRequest(BaseModel):
    query: str = Field(..., description="The user's legal situation in their own words")
    language: Language = Field(
        default=Language.EN, description="Language of the response")


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


class SectionLabel(BaseModel):
    key: str
    label: str
