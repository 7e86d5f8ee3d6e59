from pathlib import Path
from typing import Literal, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import PolicyConfig
from .services.exceptions import PolicyConfigError


class Settings(BaseSettings):
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # JSON document matching PolicyConfig. Defaults apply when unset.
    POLICY_FILE: Optional[Path] = None

    APP_TITLE: str = "Login Onboarding Policy Engine"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def load_policy_config(path: Optional[Path]) -> PolicyConfig:
    """Reads the tenant policy. Raises PolicyConfigError on unreadable or invalid files."""
    if path is None:
        return PolicyConfig()
    try:
        return PolicyConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PolicyConfigError(f"Cannot read policy file '{path}': {e}") from e
    except ValidationError as e:
        raise PolicyConfigError(f"Invalid policy file '{path}': {e}") from e


# Singleton instance
settings = Settings()
