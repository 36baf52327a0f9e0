"""
bootstrap/ - Bootstrap Layer

Configuration loading, logging setup and the command-line entry point.
"""

from .config import (
    WeighStationConfig,
    ComplianceConfig,
    LoggingConfig,
    load_config,
    get_config,
)

from .entrypoints import (
    cli_main,
    format_report,
    setup_logging,
)


__all__ = [
    # Config
    "WeighStationConfig",
    "ComplianceConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    # Entry Points
    "cli_main",
    "format_report",
    "setup_logging",
]
