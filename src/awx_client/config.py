"""Configuration and logging setup for the AWX client."""

import json
import logging
import os
import pathlib

import pydantic
import structlog

from .awxapi import DEFAULT_TIMEOUT

CONFIG_ENV_VAR = "AWX_CLIENT_CONFIG_PATH"


class ClientConfig(pydantic.BaseModel):
    """Connection settings for an AWX server."""

    base_url: str = pydantic.Field(description="Base URL of the AWX server")
    username: str | None = pydantic.Field(
        None,
        description="Username for HTTP basic authentication",
    )
    password: pydantic.SecretStr | None = pydantic.Field(
        None,
        description="Password for HTTP basic authentication",
    )
    token: pydantic.SecretStr | None = pydantic.Field(
        None,
        description="OAuth2 personal access token, used instead of basic auth",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    @pydantic.model_validator(mode="after")
    def _one_credential_kind(self) -> "ClientConfig":
        if self.token is not None and (self.username or self.password):
            msg = "configure either token or username/password, not both"
            raise ValueError(msg)
        if self.token is None and not self.username:
            msg = "username/password or token must be configured"
            raise ValueError(msg)
        return self


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output.

    The library never configures logging on import. Applications call this
    once at startup, usually with ``ClientConfig.log_level``, to see the
    client's debug events (request method, URL, status and duration).
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def resolve_config_path(config_path: str | None = None) -> str:
    """Return ``config_path`` or the path named by the environment."""
    return config_path or os.environ.get(CONFIG_ENV_VAR, "awx.json")


def load_config(config_path: str) -> ClientConfig:
    """Load client settings from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the settings are invalid.
    """
    path = pathlib.Path(config_path)
    if not path.is_file():
        msg = f"AWX client config not found: {config_path}"
        raise FileNotFoundError(msg)

    return ClientConfig.model_validate(json.loads(path.read_text()))
