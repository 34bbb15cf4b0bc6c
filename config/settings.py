"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., DEFAULT_CORES env var → Settings.DEFAULT_CORES)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

The CLI and the API read their defaults from `settings`; the scheduler
engine itself takes everything as constructor arguments so that tests
and multiple in-process runs never depend on the environment.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Simulation ──────────────────────────────────────────────
    DEFAULT_CORES: int = 1
    DEFAULT_SCHEDULING_POLICY: str = "fcfs"
    ROUND_ROBIN_TIME_QUANTUM: int = 2   # simulated ticks per Round Robin slice
    MAX_SIMULATION_JOBS: int = 10000    # upper bound on jobs per API request

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
