"""Configuration of the web listener."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ADDRESS = "0.0.0.0"
DEFAULT_PORT = 8080
_MAX_PORT = 65535


@dataclass
class WebConfig:
    """Address and port the web frontend listens on."""

    address: str = ""
    port: int = 0

    def validate_and_set_defaults(self) -> None:
        """Fill in defaults; raise ``ValueError`` for an out-of-range port."""
        if not self.address:
            self.address = DEFAULT_ADDRESS
        if self.port == 0:
            self.port = DEFAULT_PORT
        elif self.port < 0 or self.port > _MAX_PORT:
            raise ValueError(f"invalid port: value should be between 0 and {_MAX_PORT}")

    def socket_address(self) -> str:
        """Return ``address:port``."""
        return f"{self.address}:{self.port}"


def default_config() -> WebConfig:
    """Return a web configuration with the default address and port."""
    return WebConfig(address=DEFAULT_ADDRESS, port=DEFAULT_PORT)