"""Runtime settings, read from the environment (and a .env file if present)."""

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Charger les variables d'environnement
load_dotenv()

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; RecipeScraper/1.0)"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    port: int = 3001
    fetch_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    cors_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, built on first use."""
    return Settings(
        port=int(os.getenv("PORT", "3001")),
        fetch_timeout=float(os.getenv("FETCH_TIMEOUT", "30")),
        user_agent=os.getenv("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
