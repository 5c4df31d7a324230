import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    DOTENV_FILE,
    ENV_CA_BUNDLE,
    ENV_CA_DIR,
    ENV_DISABLE_SSL,
    ENV_LOG_STYLE,
    ENV_TIMEOUT,
    ENV_USER_AGENT,
)
from .models.enums import LoggingStyle


def _first_env(names: tuple[str, ...]) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def _default_user_agent() -> str:
    try:
        package_version = version("flyweight")
    except PackageNotFoundError:
        package_version = "0.0.0"
    return f"flyweight/{package_version}"


class Config(BaseModel):
    timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    log_style: LoggingStyle = LoggingStyle.NORMAL
    user_agent: str = Field(default_factory=_default_user_agent)
    verify_ssl: bool = True
    ca_bundle: Optional[str] = None
    ca_dir: Optional[str] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> "Config":
        """Build a config from ``FLYWEIGHT_*`` environment variables.

        Variables from a ``.env`` file are loaded first without overriding
        the ones already set.

        Args:
            dotenv_path: The ``.env`` file to load. Defaults to ``.env`` in the
                current working directory.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        path = Path(dotenv_path) if dotenv_path is not None else Path(DOTENV_FILE)
        if path.is_file():
            load_dotenv(path, override=False)

        values: dict[str, Any] = {}

        timeout = os.getenv(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout

        log_style = os.getenv(ENV_LOG_STYLE)
        if log_style:
            values["log_style"] = log_style.strip().lower()

        user_agent = os.getenv(ENV_USER_AGENT)
        if user_agent:
            values["user_agent"] = user_agent

        disable_ssl = os.getenv(ENV_DISABLE_SSL, "")
        if disable_ssl.strip().lower() in ("1", "true", "yes"):
            values["verify_ssl"] = False

        ca_bundle = _first_env(ENV_CA_BUNDLE)
        if ca_bundle:
            values["ca_bundle"] = ca_bundle

        ca_dir = _first_env(ENV_CA_DIR)
        if ca_dir:
            values["ca_dir"] = ca_dir

        return cls.model_validate(values)
