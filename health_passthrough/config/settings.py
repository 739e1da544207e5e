"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the passthrough API runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `log_level` reads from `LOG_LEVEL`. The listening port also reads
    from `PORT`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        grpc_health_method_path: Fully qualified remote health-check method path.
        grpc_call_timeout_seconds: Optional deadline applied to each remote call.
        auth_window_seconds: Window size for client-key derived credentials.
        default_insecure: Channel mode used when a payload omits `insecure`.
        cors_allow_origins: Origins allowed by the CORS middleware.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("application_port", "port"),
    )
    log_level: str = Field(default="INFO")
    grpc_health_method_path: str = Field(default="/grpc.health.v1.Health/Check")
    grpc_call_timeout_seconds: float | None = Field(default=None, gt=0)
    auth_window_seconds: int = Field(default=30, ge=1)
    default_insecure: bool = Field(default=False)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized_value

    @field_validator("grpc_health_method_path")
    @classmethod
    def _validate_method_path(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value.startswith("/"):
            raise ValueError("grpc_health_method_path must start with '/'")
        return stripped_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
