from pathlib import Path
import zoneinfo

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding='utf-8',
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Ticketing'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Logging
    LOG_TO_FILE: bool = False

    # Presentation
    CURRENCY_SYMBOL: str = '€'
    DISPLAY_TIMEZONE: str = 'Europe/Rome'

    @field_validator('DISPLAY_TIMEZONE')
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        try:
            zoneinfo.ZoneInfo(v)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f'Unknown timezone: {v}') from e
        return v

    @property
    def display_tz(self) -> zoneinfo.ZoneInfo:
        return zoneinfo.ZoneInfo(self.DISPLAY_TIMEZONE)


settings = Settings()  # type: ignore
