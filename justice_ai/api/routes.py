from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, status

from .dependencies import get_advice_service
from .schemas import AdviceRequest, ErrorResponse, SectionLabel
from justice_ai.advice.models import AdviceQuery, AdviceResult
from justice_ai.advice.service import AdviceService, ModelError
from justice_ai.core.constants import Language
from justice_ai.core.messages import EXAMPLE_CASES, SECTION_KEYS, section_labels, translate
from justice_ai.core.validation import validate_query


router = APIRouter(prefix="/api/v1", tags=["Legal Advice"])


@router.post(
    "/advice",
    response_model=AdviceResult,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Query rejected by validation"
        },
        502: {
            "model": ErrorResponse,
            "description": "The language model failed or returned unusable output"
        },
    },
)
async def get_legal_advice(
    request: AdviceRequest,
    service: Annotated[AdviceService, Depends(get_advice_service)],
) -> AdviceResult:
    """
    Structured legal advice (analysis, rights, action plan, disclaimer) for one query.
    """
    invalid = validate_query(request.query, request.language)
    if invalid is not None:
        raise HTTPException(
            status_code=422,
            detail={"error": invalid.code, "message": invalid.message},
        )

    try:
        return await service.request_advice(
            AdviceQuery(text=request.query.strip(), language=request.language)
        )
    except ModelError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "model_request_failed",
                "message": translate("analysis_failed", request.language),
            },
        ) from exc


@router.get("/sections", response_model=List[SectionLabel])
async def list_sections(language: Language = Language.EN) -> List[SectionLabel]:
    labels = section_labels(language)
    return [SectionLabel(key=key, label=labels[key]) for key in SECTION_KEYS]


@router.get("/examples", response_model=List[str])
async def list_examples(language: Language = Language.EN) -> List[str]:
    return EXAMPLE_CASES[language]
