import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from langchain_core.utils.json import parse_json_markdown
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from justice_ai.core.constants import Language


class AdviceQuery(BaseModel):
    """One query+language submission to the model"""

    text: str = Field(..., description="The legal query from the user")
    language: Language = Field(
        default=Language.EN, description="The language for the response")


class AdviceResult(BaseModel):
    """The model's structured answer; all four sections are mandatory"""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    legal_analysis: str = Field(
        ...,
        alias="legalAnalysis",
        min_length=1,
        description="Applicable laws and their relevance to the user's situation",
    )
    rights_analysis: str = Field(
        ...,
        alias="rightsAnalysis",
        min_length=1,
        description="The user's legal rights and protections",
    )
    action_plan: str = Field(
        ...,
        alias="actionPlan",
        min_length=1,
        description="Step-by-step plan: documents, authorities, timelines, outcomes",
    )
    disclaimer: str = Field(
        ...,
        min_length=1,
        description="Advice to consult a qualified lawyer",
    )

    def to_wire(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class SchemaViolation:
    """Model output that could not be read as an AdviceResult"""

    reason: str


def parse_advice(raw: Union[str, Dict[str, Any]]) -> Union[AdviceResult, SchemaViolation]:
    """Strictly parse model output into an AdviceResult.

    Accepts a JSON string (optionally wrapped in a Markdown code fence) or an
    already decoded mapping. Truncated JSON is rejected rather than repaired,
    so a partially populated result is never returned.
    """
    if isinstance(raw, str):
        if not raw.strip():
            return SchemaViolation("empty response")
        try:
            payload = parse_json_markdown(raw, parser=json.loads)
        except ValueError as exc:
            return SchemaViolation(f"response is not valid JSON: {exc}")
    else:
        payload = raw

    if not isinstance(payload, dict):
        return SchemaViolation(
            f"expected a JSON object, got {type(payload).__name__}")

    try:
        return AdviceResult.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors())
        return SchemaViolation(f"invalid or missing fields: {fields}")
