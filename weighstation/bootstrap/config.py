"""
bootstrap/config.py - Application configuration

Provides configuration loading from files, environment variables, and defaults.
The compliance engine itself takes its settings as arguments; this module
serves the command-line layer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from ..compliance.engine import DEFAULT_WARNING_RATIO, validate_warning_ratio
from ..errors import ConfigurationLoadError, ErrorCode, InvalidConfigurationError, ValidationIssue

logger = logging.getLogger("bootstrap.config")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class ComplianceConfig:
    """Compliance evaluation settings."""

    default_jurisdiction: Optional[str] = None  # None = federal
    warning_ratio: float = DEFAULT_WARNING_RATIO

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        validate_warning_ratio(self.warning_ratio, field="compliance.warning_ratio")

    @classmethod
    def from_env(cls) -> "ComplianceConfig":
        ratio = os.getenv("WEIGHSTATION_WARNING_RATIO", str(DEFAULT_WARNING_RATIO))
        try:
            warning_ratio = float(ratio)
        except ValueError as e:
            raise InvalidConfigurationError(
                [ValidationIssue("WEIGHSTATION_WARNING_RATIO", "must be a number", ratio)],
                subject="environment configuration",
                code=ErrorCode.SYS_CONFIG,
            ) from e
        return cls(
            default_jurisdiction=os.getenv("WEIGHSTATION_JURISDICTION") or None,
            warning_ratio=warning_ratio,
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("WEIGHSTATION_LOG_LEVEL", "INFO"),
            format=os.getenv("WEIGHSTATION_LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv("WEIGHSTATION_LOG_FILE"),
            json_logs=_env_flag("WEIGHSTATION_JSON_LOGS"),
        )


@dataclass
class WeighStationConfig:
    """Root configuration."""

    environment: str = "development"
    debug: bool = False
    version: str = "1.0.0"

    compliance: ComplianceConfig = field(default_factory=ComplianceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "WeighStationConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.getenv("WEIGHSTATION_ENVIRONMENT", "development"),
            debug=_env_flag("WEIGHSTATION_DEBUG"),
            compliance=ComplianceConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "WeighStationConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationLoadError(str(path), str(e)) from e

        if not isinstance(data, dict):
            raise ConfigurationLoadError(str(path), "top-level value must be an object")

        for section in ("compliance", "logging"):
            if section in data and not isinstance(data[section], dict):
                raise ConfigurationLoadError(str(path), f"'{section}' must be an object")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "WeighStationConfig":
        """Create config from dictionary."""
        config = cls.from_env()

        # Override with file values
        if "environment" in data:
            config.environment = data["environment"]
        if "debug" in data:
            config.debug = data["debug"]

        if "compliance" in data:
            for key, value in data["compliance"].items():
                if hasattr(config.compliance, key):
                    setattr(config.compliance, key, value)
            config.compliance.validate()

        if "logging" in data:
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "version": self.version,
            "compliance": {
                "default_jurisdiction": self.compliance.default_jurisdiction,
                "warning_ratio": self.compliance.warning_ratio,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[WeighStationConfig] = None


def load_config(filepath: str = None) -> WeighStationConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        WeighStationConfig instance
    """
    global _config

    if filepath:
        _config = WeighStationConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./weighstation.json",
            "./config/weighstation.json",
            os.path.expanduser("~/.weighstation/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = WeighStationConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = WeighStationConfig.from_env()

    logger.info(f"Configuration loaded: environment={_config.environment}")
    return _config


def get_config() -> WeighStationConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
