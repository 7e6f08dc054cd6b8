"""Configuration via environment variables and command-line flags."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

TRANSIFEX_API_URL = "https://api.transifex.com/organizations/python-doc/projects/python-"


class Settings(BaseSettings):
    model_config = {"env_prefix": "TX_BADGE_", "cli_prog_name": "tx-badge"}

    key: str = ""
    addr: str = "127.0.0.1:8080"
    api_url: str = TRANSIFEX_API_URL
    timeout_seconds: float = 10.0
    cache_ttl_seconds: int = 3600
    cache_max_size: int = 16
    log_level: str = "INFO"

    @field_validator("addr")
    @classmethod
    def _check_addr(cls, value: str) -> str:
        host, sep, port = value.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"listen address must be host:port, got {value!r}")
        return value

    @property
    def host(self) -> str:
        return self.addr.rpartition(":")[0].strip("[]") or "0.0.0.0"

    @property
    def port(self) -> int:
        return int(self.addr.rpartition(":")[2])
