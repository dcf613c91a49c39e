"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from bpcore.domain.models import ReadingSource

# Load environment variables from .env file
load_dotenv()


class ParserConfig(BaseModel):
    """Free-text parser settings."""

    max_input_chars: int = Field(
        default=1000, gt=0, description="Longer input is truncated before pattern matching"
    )
    default_source: ReadingSource = Field(
        default=ReadingSource.VOICE, description="Source recorded on text-derived readings"
    )


class SummaryConfig(BaseModel):
    """Summary and range-window settings."""

    default_range: str = Field(default="7d", description="Range label used when none is given")

    @field_validator("default_range")
    def validate_default_range(cls, v):
        if not v or not v.strip():
            raise ValueError("default range label must not be blank")
        return v.strip().lower()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    # Component configs
    parser: ParserConfig = Field(default_factory=ParserConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    # Detect environment
    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    parser_config = ParserConfig(
        max_input_chars=int(os.getenv("PARSER_MAX_INPUT_CHARS", "1000")),
        default_source=ReadingSource(os.getenv("PARSER_DEFAULT_SOURCE", "voice").strip().lower()),
    )

    summary_config = SummaryConfig(
        default_range=os.getenv("SUMMARY_DEFAULT_RANGE", "7d"),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        parser=parser_config,
        summary=summary_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


# Development helpers
def print_config_summary() -> None:
    """Print configuration summary for debugging."""
    config = get_config()

    print("\nCONFIGURATION SUMMARY")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"Log Level: {config.logging.level} ({config.logging.format})")

    print("\nPARSER")
    print(f"Max Input Chars: {config.parser.max_input_chars}")
    print(f"Default Source: {config.parser.default_source.value}")

    print("\nSUMMARY")
    print(f"Default Range: {config.summary.default_range}")


if __name__ == "__main__":
    print_config_summary()
