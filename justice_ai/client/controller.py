from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Union

from justice_ai.advice.models import AdviceQuery, AdviceResult
from justice_ai.advice.service import ModelError
from justice_ai.client.storage import KeyValueStore
from justice_ai.core.constants import AppSettings, Language
from justice_ai.core.messages import translate
from justice_ai.core.validation import QueryValidationError, validate_query

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "analysis_failed"


class Phase(str, Enum):
    """Lifecycle of the analyze action"""
    IDLE = "idle"
    VALIDATING = "validating"
    REQUESTING = "requesting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Success:
    result: AdviceResult


@dataclass(frozen=True)
class Failure:
    reason: str
    retryable: bool


RequestOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class Notice:
    """Toast-style notification for the UI to display"""
    title: str
    description: str
    variant: str = "default"


class AdviceRequester(Protocol):
    async def request_advice(self, query: AdviceQuery) -> AdviceResult:
        ...


class AnalysisController:
    """UI state and request orchestration for one user session.

    Only one request is in flight at a time: analyze() is a no-op while
    loading. Each submission gets a new request id and a completion is
    applied only if its id is still the latest, so responses that arrive
    after clear() or close() are dropped.
    """

    MAX_RETRIES = AppSettings.MAX_RETRIES
    DRAFT_KEY = AppSettings.DRAFT_STORAGE_KEY

    def __init__(
        self,
        requester: AdviceRequester,
        store: KeyValueStore,
        language: Language = Language.EN,
        notifier: Optional[Callable[[Notice], None]] = None,
    ):
        self.requester = requester
        self.store = store
        self.notifier = notifier

        self.language = Language(language)
        self.query: str = store.get(self.DRAFT_KEY) or ""
        self.phase = Phase.IDLE
        self.loading = False
        self.result: Optional[AdviceResult] = None
        # Message keys, translated on read so they follow the current language
        self._error_key: Optional[str] = None
        self._validation_rejected = False
        self.retry_count = 0

        self._request_id = 0
        self._last_submission: Optional[AdviceQuery] = None
        self._closed = False

    # Derived state

    @property
    def error(self) -> Optional[str]:
        if self._error_key is None:
            return None
        return translate(self._error_key, self.language)

    @property
    def validation_error(self) -> Optional[QueryValidationError]:
        if not self._validation_rejected:
            return None
        return validate_query(self.query, self.language)

    @property
    def can_analyze(self) -> bool:
        return not self.loading and validate_query(self.query, self.language) is None

    @property
    def can_retry(self) -> bool:
        return (
            not self.loading
            and self._error_key is not None
            and self._last_submission is not None
            and self.retry_count < self.MAX_RETRIES
        )

    @property
    def retries_exhausted(self) -> bool:
        return self._error_key is not None and self.retry_count >= self.MAX_RETRIES

    # Input

    def set_query(self, text: str) -> None:
        self.query = text
        self._validation_rejected = False
        if text:
            self.store.set(self.DRAFT_KEY, text)

    def set_language(self, language: Language) -> None:
        self.language = Language(language)

    # Actions

    async def analyze(self) -> Optional[RequestOutcome]:
        """Validate the current draft and submit it.

        Returns None when nothing was sent (already loading, or the input
        was rejected and `validation_error` is set).
        """
        if self.loading or self._closed:
            return None

        self.phase = Phase.VALIDATING
        error = validate_query(self.query, self.language)
        if error is not None:
            self._validation_rejected = True
            self.phase = Phase.IDLE
            return None

        self._validation_rejected = False
        submission = AdviceQuery(text=self.query.strip(), language=self.language)
        self._last_submission = submission
        return await self._submit(submission)

    async def retry(self) -> Optional[RequestOutcome]:
        """Resubmit the last query after a failure, at most MAX_RETRIES times."""
        if not self.can_retry or self._closed:
            return None

        self.retry_count += 1
        logger.info("Retrying advice request (%d/%d)", self.retry_count, self.MAX_RETRIES)
        return await self._submit(self._last_submission)

    def clear(self) -> None:
        # Invalidate any in-flight request
        self._request_id += 1
        self.query = ""
        self.result = None
        self._error_key = None
        self._validation_rejected = False
        self.retry_count = 0
        self.loading = False
        self.phase = Phase.IDLE
        self._last_submission = None
        self.store.remove(self.DRAFT_KEY)

    def close(self) -> None:
        self._request_id += 1
        self._closed = True
        self.loading = False

    # Internals

    async def _submit(self, submission: AdviceQuery) -> RequestOutcome:
        self._request_id += 1
        request_id = self._request_id

        self.loading = True
        self.result = None
        self._error_key = None
        self.phase = Phase.REQUESTING

        language = submission.language
        try:
            advice = await self.requester.request_advice(submission)
            outcome: RequestOutcome = Success(advice)
        except ModelError as e:
            logger.warning("Advice request %d failed: %s", request_id, e)
            outcome = self._failure(language)
        except Exception:
            logger.exception("Unexpected error in advice request %d", request_id)
            outcome = self._failure(language)

        if request_id != self._request_id:
            logger.info("Discarding stale response for request %d", request_id)
            return outcome

        self.loading = False
        if isinstance(outcome, Success):
            self.result = outcome.result
            self.retry_count = 0
            self.phase = Phase.SUCCESS
            self._notify(Notice(
                title=translate("notice_success_title", language),
                description=translate("notice_success_body", language),
            ))
        else:
            self._error_key = FAILURE_MESSAGE
            self.phase = Phase.FAILED
            self._notify(Notice(
                title=translate("notice_failure_title", language),
                description=outcome.reason,
                variant="destructive",
            ))
        return outcome

    def _failure(self, language: Language) -> Failure:
        return Failure(
            reason=translate(FAILURE_MESSAGE, language),
            retryable=self.retry_count < self.MAX_RETRIES,
        )

    def _notify(self, notice: Notice) -> None:
        if self.notifier is not None:
            self.notifier(notice)
