import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from common.constants import CANDIDATE_POOL_SIZE, TARGET_WORD_COUNT

load_dotenv()


class Settings(BaseModel):
    jisho_api_url: str = "https://jisho.org/api/v1/search/words"
    http_timeout: float = Field(10.0, gt=0)
    http_user_agent: str = "kanji-wordlist/0.1 (+local-use)"
    candidate_pool_size: int = Field(CANDIDATE_POOL_SIZE, ge=1)
    target_word_count: int = Field(TARGET_WORD_COUNT, ge=1)
    lookup_concurrency: int = Field(1, ge=1)  # 1 = sequential lookups
    log_level: str = "INFO"


def _from_env() -> dict:
    env_map = {
        "jisho_api_url": "JISHO_API_URL",
        "http_timeout": "HTTP_TIMEOUT",
        "http_user_agent": "HTTP_USER_AGENT",
        "candidate_pool_size": "CANDIDATE_POOL_SIZE",
        "target_word_count": "TARGET_WORD_COUNT",
        "lookup_concurrency": "LOOKUP_CONCURRENCY",
        "log_level": "LOG_LEVEL",
    }
    return {
        field: os.getenv(var) for field, var in env_map.items() if os.getenv(var)
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Settings are read once from the environment (and .env, if present).
    Unset variables keep their defaults.
    """
    return Settings(**_from_env())
