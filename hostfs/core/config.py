import codecs
from typing import Literal, Optional, Union

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HOSTFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="hostfs", description="Service name attached to log events")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment mode"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )

    default_file_mode: int = Field(
        default=0o644, description="Mode applied by write_text_file when none is given"
    )
    text_encoding: str = Field(
        default="utf-8", description="Codec used to encode written and decode read text"
    )
    text_errors: str = Field(
        default="surrogateescape", description="Codec error handler for text I/O"
    )

    @field_validator("default_file_mode", mode="before")
    @classmethod
    def parse_file_mode(cls, v: Union[int, str]) -> int:
        # Environment values such as "0644" or "0o600" are octal
        if isinstance(v, str):
            v = v.strip().lower()
            if v.startswith("0o"):
                v = v[2:]
            v = int(v, 8)
        if not 0 <= v <= 0o7777:
            raise ValueError(f"invalid file mode: {oct(v)}")
        return v

    @field_validator("text_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    @field_validator("text_errors")
    @classmethod
    def validate_error_handler(cls, v: str) -> str:
        try:
            codecs.lookup_error(v)
        except LookupError:
            raise ValueError(f"unknown error handler: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str, info: ValidationInfo) -> str:
        if info.data.get("environment") == "production":
            return "json"
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
