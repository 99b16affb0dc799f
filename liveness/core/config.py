from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from liveness.core.errors import BindError

MIN_PORT = 1
MAX_PORT = 65535


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    # Kept as a raw string: empty means "use the service default"
    PORT: Optional[str] = None


@dataclass(frozen=True)
class ServiceProfile:
    """Static identity of one deployable liveness service."""

    name: str
    label: str
    default_port: int
    health_body: str


@dataclass(frozen=True)
class ListenConfig:
    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


def resolve_listen_config(
    profile: ServiceProfile,
    configured_port: Optional[str] = None,
    host: str = "0.0.0.0",
) -> ListenConfig:
    """
    Build the listen address for a service.

    A non-empty configured_port wins, otherwise the profile default is used.
    Raises BindError if the chosen value is not a usable TCP port.
    """
    raw = configured_port if configured_port else str(profile.default_port)

    # Plain ASCII digits only: no sign, whitespace, underscores or other scripts
    if not (raw.isascii() and raw.isdigit()):
        raise BindError(raw, "port is not an integer")

    port = int(raw)
    if not MIN_PORT <= port <= MAX_PORT:
        raise BindError(raw, f"port must be between {MIN_PORT} and {MAX_PORT}")

    return ListenConfig(host=host, port=port)
