# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "alert-scheduler")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    DEFAULT_TEAMS: str = os.getenv("DEFAULT_TEAMS", "Alpha:1.1,Beta:0.9,Gamma:1.0")
    MAX_ALERTS_PER_RUN: int = int(os.getenv("MAX_ALERTS_PER_RUN", "10000"))
    MAX_RUN_HISTORY: int = int(os.getenv("MAX_RUN_HISTORY", "200"))
    DEFAULT_RUN_LIMIT: int = int(os.getenv("DEFAULT_RUN_LIMIT", "50"))

    BENCHMARK_SIZES: list[int] = [
        int(s) for s in os.getenv("BENCHMARK_SIZES", "100,500,1000,2000,5000").split(",") if s.strip()
    ]
    MAX_BENCHMARK_SIZE: int = int(os.getenv("MAX_BENCHMARK_SIZE", "20000"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
