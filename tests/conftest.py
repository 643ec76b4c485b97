import asyncio
import json

import pytest
from langchain_core.language_models import FakeListChatModel

from justice_ai.advice.models import AdviceResult
from justice_ai.advice.service import AdviceService
from justice_ai.client.controller import AnalysisController
from justice_ai.client.storage import InMemoryStore


@pytest.fixture
def landlord_query():
    return "My landlord kept my deposit for no reason and won't respond."


@pytest.fixture
def advice_payload():
    return {
        "legalAnalysis": "Section 4 of the Punjab Rented Premises Act 2009 caps the security deposit.",
        "rightsAnalysis": "You are entitled to the return of your deposit less lawful deductions.",
        "actionPlan": "1. Send a written notice. 2. File before the Rent Tribunal if ignored.",
        "disclaimer": "This is general information; consult a qualified lawyer.",
    }


@pytest.fixture
def urdu_advice_payload():
    return {
        "legalAnalysis": "پنجاب کرایہ داری ایکٹ 2009 کی دفعہ 4 سیکیورٹی رقم کی حد مقرر کرتی ہے۔",
        "rightsAnalysis": "آپ اپنی سیکیورٹی رقم واپس لینے کے حقدار ہیں۔",
        "actionPlan": "1. تحریری نوٹس بھیجیں۔ 2. رینٹ ٹریبونل سے رجوع کریں۔",
        "disclaimer": "یہ عمومی معلومات ہیں، کسی مستند وکیل سے مشورہ کریں۔",
    }


@pytest.fixture
def advice_result(advice_payload):
    return AdviceResult.model_validate(advice_payload)


@pytest.fixture
def make_service():
    """Build an AdviceService whose model replies with the given raw strings"""
    def factory(*responses):
        llm = FakeListChatModel(responses=list(responses))
        return AdviceService(llm=llm)

    return factory


@pytest.fixture
def json_reply(advice_payload):
    return json.dumps(advice_payload)


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def requester(mocker, advice_result):
    mock_requester = mocker.Mock()
    mock_requester.request_advice = mocker.AsyncMock(return_value=advice_result)
    return mock_requester


@pytest.fixture
def notices():
    return []


@pytest.fixture
def controller(requester, memory_store, notices):
    return AnalysisController(
        requester=requester,
        store=memory_store,
        notifier=notices.append,
    )


class ControlledRequester:
    """Requester whose responses are released by the test, one future per call"""

    def __init__(self):
        self.calls = []
        self.pending = []

    async def request_advice(self, query):
        future = asyncio.get_running_loop().create_future()
        self.calls.append(query)
        self.pending.append(future)
        return await future


@pytest.fixture
def controlled_requester():
    return ControlledRequester()
