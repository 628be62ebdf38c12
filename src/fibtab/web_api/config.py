"""
Configuration settings for the API.
``FIBTAB_API_<NAME>`` environment variables override defaults.
"""
import os
from dataclasses import dataclass, field, fields
from typing import List

ENV_PREFIX = "FIBTAB_API_"


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Request limits
    MAX_LADDER_DEPTH: int = 200
    MAX_TEXT_CHARS: int = 1_000_000

    def __post_init__(self):
        """Load from environment variables"""
        for f in fields(self):
            raw = os.getenv(ENV_PREFIX + f.name)
            if raw is None:
                continue
            current = getattr(self, f.name)
            if isinstance(current, bool):
                value = raw.lower() in ("true", "1", "yes")
            elif isinstance(current, int):
                value = int(raw)
            elif isinstance(current, list):
                value = [item.strip() for item in raw.split(",") if item.strip()]
            else:
                value = raw
            setattr(self, f.name, value)


# Global settings instance
settings = Settings()
