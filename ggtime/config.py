"""
Configuration - Settings read from the environment.

Only the outer layers (host controller factory, API, CLI) read settings.
The session model and the codec are configuration-free.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os

from .session import ParticipantKey


@dataclass
class Settings:
    """Runtime settings."""
    env: str = "development"
    log_level: str = "INFO"
    participant_key: ParticipantKey = ParticipantKey.NAME
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from environment variables.

        GGTIME_ENV, GGTIME_LOG_LEVEL, GGTIME_PARTICIPANT_KEY ("name" or
        "identity") and ALLOWED_ORIGINS (comma separated).
        """
        key_value = os.getenv("GGTIME_PARTICIPANT_KEY", ParticipantKey.NAME.value).lower()
        try:
            participant_key = ParticipantKey(key_value)
        except ValueError:
            raise ValueError(
                f"GGTIME_PARTICIPANT_KEY must be 'name' or 'identity', got {key_value!r}"
            )

        return cls(
            env=os.getenv("GGTIME_ENV", "development"),
            log_level=os.getenv("GGTIME_LOG_LEVEL", "INFO").upper(),
            participant_key=participant_key,
            allowed_origins=[
                origin.strip()
                for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
                if origin.strip()
            ],
        )
