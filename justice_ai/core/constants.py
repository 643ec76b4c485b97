from enum import Enum


class OllamaModels(Enum):
    """Supported Ollama model identifiers"""

    LLAMA3_8B = "llama3.1:8b"
    LLAMA3_70B = "llama3:70b"
    MISTRAL_7B = "mistral:7b"
    GEMMA_2_9B = "gemma2:9b"
    QWEN_2_5_7B = "qwen2.5:7b"


class Language(str, Enum):
    """Languages the advice and the UI can be rendered in"""

    EN = "en"
    UR = "ur"

    @property
    def display_name(self) -> str:
        return {Language.EN: "English", Language.UR: "Urdu"}[self]

    @property
    def native_name(self) -> str:
        return {Language.EN: "English", Language.UR: "اردو"}[self]


class AppSettings:
    """Central place for all application-level configuration"""

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    OLLAMA_MODEL: OllamaModels = OllamaModels.LLAMA3_8B
    OLLAMA_BASE_URL: str = "http://localhost:11434"
    OLLAMA_TEMPERATURE: float = 0.2

    MIN_QUERY_LENGTH: int = 10
    MAX_QUERY_LENGTH: int = 2000
    MAX_RETRIES: int = 3

    DRAFT_STORAGE_KEY = "justiceai-query"
    DRAFT_STORE_DIR = "~/.justiceai/drafts"
    DRAFT_QUERY_PARAM = "draft"
