from dataclasses import dataclass
import logging
import os
from dotenv import load_dotenv


load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    try:
        return int(value) if value else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    web_mode: bool = os.getenv("CGPACALC_WEB", "0") == "1"
    port: int = _int_env("PORT", 8550)

    grade_mode: str = os.getenv("CGPACALC_GRADE_MODE", "numerical").strip().lower()
    decimals: int = _int_env("CGPACALC_DECIMALS", 2)

    log_level: str = os.getenv("CGPACALC_LOG_LEVEL", "INFO").upper()

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
