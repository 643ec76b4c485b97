"""
View models for the Streamlit page.

Kept free of any Streamlit import so the rendering decisions (labels,
which controls are enabled, what the banner says) are plain data.
"""
import html
from dataclasses import dataclass
from typing import List, Optional

from justice_ai.advice.models import AdviceResult
from justice_ai.client.controller import AnalysisController
from justice_ai.core.constants import AppSettings, Language
from justice_ai.core.messages import EXAMPLE_CASES, SECTION_KEYS, section_labels, translate
from justice_ai.core.validation import format_character_count, is_near_limit


@dataclass(frozen=True)
class ResultSection:
    key: str
    label: str
    body: str


@dataclass(frozen=True)
class ControlsView:
    analyze_label: str
    analyze_enabled: bool
    clear_label: str
    clear_enabled: bool
    retry_label: str
    retry_enabled: bool
    character_count: str
    near_limit: bool


def result_sections(result: AdviceResult, language: Language) -> List[ResultSection]:
    labels = section_labels(language)
    wire = result.to_wire()
    return [ResultSection(key, labels[key], wire[key]) for key in SECTION_KEYS]


def controls_state(controller: AnalysisController) -> ControlsView:
    language = controller.language
    length = len(controller.query.strip())
    maximum = AppSettings.MAX_QUERY_LENGTH
    return ControlsView(
        analyze_label=translate("analyzing" if controller.loading else "analyze", language),
        analyze_enabled=controller.can_analyze,
        clear_label=translate("clear", language),
        clear_enabled=True,
        retry_label=f'{translate("retry", language)} ({controller.retry_count}/{controller.MAX_RETRIES})',
        retry_enabled=controller.can_retry,
        character_count=format_character_count(length, maximum),
        near_limit=is_near_limit(length, maximum),
    )


def error_banner(controller: AnalysisController) -> Optional[str]:
    if controller.error is None:
        return None
    if controller.retries_exhausted:
        return f'{controller.error} {translate("retries_exhausted", controller.language)}'
    return controller.error


def example_cases(language: Language) -> List[str]:
    return list(EXAMPLE_CASES[Language(language)])


def rtl_html(text: str) -> str:
    """Right-to-left block for Urdu output; the model text is HTML-escaped."""
    return f"<div dir='rtl'>{html.escape(text)}</div>"
