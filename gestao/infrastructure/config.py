from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    idempotencia_janela_segundos: int
    viacep_url: str
    http_timeout: float
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        idempotencia_janela_segundos=int(os.environ.get("IDEMPOTENCIA_JANELA_SEGUNDOS", "60")),
        viacep_url=os.environ.get("VIACEP_URL", "https://viacep.com.br/ws"),
        http_timeout=float(os.environ.get("HTTP_TIMEOUT", "5")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
