import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from justice_ai.advice.models import AdviceQuery, AdviceResult, SchemaViolation, parse_advice
from justice_ai.core.constants import Language
from justice_ai.core.prompts import (
    ENGLISH_DIRECTIVE,
    LEGAL_ADVICE_PROMPT,
    LEGAL_CONTEXT,
    URDU_DIRECTIVE,
)

logger = logging.getLogger(__name__)


class ModelError(Exception):
    """The model call failed or returned output that does not fit AdviceResult"""
    pass


class AdviceService:
    """Turns a query into structured legal advice with a single model call.

    Failures surface as ModelError; retrying is left to the caller.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm
        self.prompt = ChatPromptTemplate.from_template(LEGAL_ADVICE_PROMPT)
        self.chain = self._build_chain()

    def _build_chain(self):
        return self.prompt | self.llm | StrOutputParser()

    @staticmethod
    def prompt_inputs(query: AdviceQuery) -> dict:
        directive = URDU_DIRECTIVE if query.language == Language.UR else ENGLISH_DIRECTIVE
        return {
            "legal_context": LEGAL_CONTEXT,
            "query": query.text.strip(),
            "language_directive": directive,
        }

    def render_prompt(self, query: AdviceQuery) -> str:
        return self.prompt.format(**self.prompt_inputs(query))

    async def request_advice(self, query: AdviceQuery) -> AdviceResult:
        """
        Ask the model for advice on one query

        Raises:
            ModelError: On provider errors or a response that fails the schema
        """
        logger.info(
            "Requesting advice | language=%s | chars=%d",
            query.language.value,
            len(query.text.strip()),
        )
        try:
            raw = await self.chain.ainvoke(self.prompt_inputs(query))
        except Exception as exc:
            logger.exception("Model invocation failed")
            raise ModelError("Model invocation failed") from exc

        parsed = parse_advice(raw)
        if isinstance(parsed, SchemaViolation):
            logger.warning("Model output rejected: %s", parsed.reason)
            raise ModelError(f"Model output rejected: {parsed.reason}")

        logger.info("Advice received | language=%s", query.language.value)
        return parsed
