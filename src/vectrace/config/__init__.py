"""Configuration management for vectrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, keyword arguments or defaults.

Key classes:
- TraceSettings: Per-trace thresholds, Potrace tuning and output styling
- SchedulerConfig: Cooperative yielding intervals
- EngineConfig: Primary engine selection
- LoggingConfig: Logging settings
- VectraceSettings: Main application settings
"""

from vectrace.config.settings import (
    EngineConfig,
    LoggingConfig,
    SchedulerConfig,
    TraceSettings,
    TurnPolicy,
    VectraceSettings,
    get_default_settings,
)

__all__ = [
    "EngineConfig",
    "LoggingConfig",
    "SchedulerConfig",
    "TraceSettings",
    "TurnPolicy",
    "VectraceSettings",
    "get_default_settings",
]
