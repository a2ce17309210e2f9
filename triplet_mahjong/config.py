"""Application configuration settings."""
import os
import json
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional, List

from .models.game_settings import GameRules


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Triplet Mahjong Engine"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS settings - as comma-separated string or JSON array
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Game rules
    hand_capacity: int = 7
    score_per_match: int = 100
    score_per_hint: int = 100
    bonus_per_level: int = 50
    undo_uses: int = 3
    hint_uses: int = 2

    # Sessions kept in memory
    max_sessions: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("hand_capacity")
    @classmethod
    def validate_hand_capacity(cls, value: int) -> int:
        """A hand smaller than a triplet can never match."""
        if value < 3:
            raise ValueError("hand_capacity must be at least 3")
        return value

    @field_validator("undo_uses", "hint_uses", "max_sessions")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from string (comma-separated or JSON)."""
        if not self.cors_origins:
            return ["http://localhost:5173"]

        # Try JSON parse first
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
        except json.JSONDecodeError:
            pass

        # Fall back to comma-separated
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def game_rules(self) -> GameRules:
        """Build the engine rules from settings."""
        return GameRules(
            hand_capacity=self.hand_capacity,
            score_per_match=self.score_per_match,
            score_per_hint=self.score_per_hint,
            bonus_per_level=self.bonus_per_level,
            undo_uses=self.undo_uses,
            hint_uses=self.hint_uses,
        )


# Don't use lru_cache in production to allow env var updates
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (cached in production for performance)."""
    global _settings
    if _settings is None or os.getenv("DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
