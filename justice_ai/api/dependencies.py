from fastapi import Depends
from langchain_ollama import ChatOllama

from justice_ai.advice.service import AdviceService
from justice_ai.core.config import Settings, get_settings


def get_settings_dependency() -> Settings:
    return get_settings()


def get_ollama(settings: Settings = Depends(get_settings_dependency)) -> ChatOllama:
    return ChatOllama(**settings.ollama_config)


def get_advice_service(llm: ChatOllama = Depends(get_ollama)) -> AdviceService:
    return AdviceService(llm=llm)
