"""Configuration module: frozen dataclass merged from defaults, YAML and env vars.

Precedence, lowest to highest: dataclass defaults <- YAML file <- environment
variables. An explicitly set value always wins over a default.
"""

import dataclasses
import logging
import os
from dataclasses import dataclass

import yaml

from log_router.inspector import validate_depth
from log_router.levels import DEBUG, WARNING, validate_level

logger = logging.getLogger(__name__)

LOCAL0 = 16


def _parse_levels(value: str) -> tuple[int, ...]:
    """Parse ``"0,1, 2"`` into ``(0, 1, 2)``; blank means no filter."""
    return tuple(int(part) for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class LoggerConfig:
    # Ingestion endpoint
    serve_path: str = "/logger"
    host: str = "0.0.0.0"
    port: int = 3000
    # Document store
    collection_name: str = "logger"
    store_max_documents: int = 10000
    # Syslog
    depth: int | None = 2
    syslog_ident: str = "log-router"
    syslog_facility: int = LOCAL0
    syslog_host: str = "localhost"
    syslog_port: int = 514
    # Routing
    accepted_levels: tuple[int, ...] = ()
    min_low: int = DEBUG
    max_high: int = WARNING

    def __post_init__(self):
        accepted = self.accepted_levels
        if accepted is None:
            accepted = ()
        elif not isinstance(accepted, (list, tuple, set, frozenset)):
            # A single YAML scalar such as ``accepted_levels: 7``
            accepted = (accepted,)
        object.__setattr__(self, "accepted_levels", tuple(accepted))
        for level in self.accepted_levels:
            validate_level(level)
        validate_depth(self.depth)
        validate_level(self.min_low)
        validate_level(self.max_high)

    @classmethod
    def from_dict(cls, d: dict) -> "LoggerConfig":
        """Build a config from a flat dict; missing keys keep their defaults."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in d.items() if k in known})


def _load_yaml(path: str) -> dict:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.info("No config file at %s, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        logger.warning("Invalid YAML in %s, using defaults: %s", path, exc)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    # Accept either a flat file or one nested under a "logger" section
    section = data.get("logger")
    return dict(section) if isinstance(section, dict) else data


def _env_overrides() -> dict:
    env = os.environ
    overrides: dict = {}
    if "LOGGER_SERVE_PATH" in env:
        overrides["serve_path"] = env["LOGGER_SERVE_PATH"]
    if "SERVER_HOST" in env:
        overrides["host"] = env["SERVER_HOST"]
    if "SERVER_PORT" in env:
        overrides["port"] = int(env["SERVER_PORT"])
    if "LOGGER_COLLECTION_NAME" in env:
        overrides["collection_name"] = env["LOGGER_COLLECTION_NAME"]
    if "STORE_MAX_DOCUMENTS" in env:
        overrides["store_max_documents"] = int(env["STORE_MAX_DOCUMENTS"])
    if "LOGGER_DEPTH" in env:
        raw = env["LOGGER_DEPTH"].strip().lower()
        overrides["depth"] = None if raw in ("", "none", "unlimited") else int(raw)
    if "SYSLOG_IDENT" in env:
        overrides["syslog_ident"] = env["SYSLOG_IDENT"]
    if "SYSLOG_FACILITY" in env:
        overrides["syslog_facility"] = int(env["SYSLOG_FACILITY"])
    if "SYSLOG_HOST" in env:
        overrides["syslog_host"] = env["SYSLOG_HOST"]
    if "SYSLOG_PORT" in env:
        overrides["syslog_port"] = int(env["SYSLOG_PORT"])
    if "LOGGER_ACCEPTED_LEVELS" in env:
        overrides["accepted_levels"] = _parse_levels(env["LOGGER_ACCEPTED_LEVELS"])
    if "LOGGER_MIN_LOW" in env:
        overrides["min_low"] = int(env["LOGGER_MIN_LOW"])
    if "LOGGER_MAX_HIGH" in env:
        overrides["max_high"] = int(env["LOGGER_MAX_HIGH"])
    return overrides


def load_config(path: str | None = None) -> LoggerConfig:
    """Build LoggerConfig from defaults <- YAML file <- env vars.

    The YAML path is *path*, else the ``CONFIG_PATH`` environment variable;
    with neither, only defaults and env vars apply.
    """
    path = path or os.environ.get("CONFIG_PATH")
    values = _load_yaml(path) if path else {}
    values.update(_env_overrides())
    return LoggerConfig.from_dict(values)
