# src/duckduckgo_mcp/config.py
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PER_SECOND_LIMIT = 1
DEFAULT_PER_MONTH_LIMIT = 15000

# Keys accepted in the YAML config file
RECOGNIZED_FILE_KEYS = ("per_second_limit", "per_month_limit")

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if number != value and not isinstance(value, str):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if number <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return number


@dataclass
class SearchServerConfig:
    """DuckDuckGo MCP server configuration"""
    # Rate limiting
    per_second_limit: int = DEFAULT_PER_SECOND_LIMIT
    per_month_limit: int = DEFAULT_PER_MONTH_LIMIT

    # Transport settings
    transport: str = "stdio"
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = "/mcp/"

    log_level: str = "INFO"

    def __post_init__(self):
        self.per_second_limit = _positive_int("per_second_limit", self.per_second_limit)
        self.per_month_limit = _positive_int("per_month_limit", self.per_month_limit)

        self.transport = self.transport.lower()
        if self.transport not in TRANSPORTS:
            raise ValueError(
                f"Unsupported transport '{self.transport}', expected one of {', '.join(TRANSPORTS)}"
            )
        if self.port is not None:
            self.port = int(self.port)

    @classmethod
    def from_file(cls, path: str) -> Dict[str, Any]:
        """Read rate limit options from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        options = {}
        for key, value in data.items():
            if key in RECOGNIZED_FILE_KEYS:
                options[key] = value
            else:
                logger.warning(f"Ignoring unrecognized config option '{key}' in {path}")
        return options

    @classmethod
    def from_environment(cls, environ: Optional[Dict[str, str]] = None) -> "SearchServerConfig":
        """
        Build configuration from defaults, an optional YAML file and environment overrides.

        The YAML file is named by DDG_MCP_CONFIG. Environment variables win over the file.
        """
        env = os.environ if environ is None else environ
        options: Dict[str, Any] = {}

        config_path = env.get("DDG_MCP_CONFIG")
        if config_path:
            options.update(cls.from_file(config_path))
            logger.info(f"Loaded configuration from {config_path}")

        if env.get("DDG_RATE_LIMIT_PER_SECOND"):
            options["per_second_limit"] = env["DDG_RATE_LIMIT_PER_SECOND"]
        if env.get("DDG_RATE_LIMIT_PER_MONTH"):
            options["per_month_limit"] = env["DDG_RATE_LIMIT_PER_MONTH"]

        options["transport"] = env.get("MCP_TRANSPORT", "stdio")
        options["host"] = env.get("MCP_HOST")
        if env.get("MCP_PORT"):
            options["port"] = env["MCP_PORT"]
        options["path"] = env.get("MCP_PATH", "/mcp/")
        options["log_level"] = env.get("LOG_LEVEL", "INFO").upper()

        return cls(**options)
