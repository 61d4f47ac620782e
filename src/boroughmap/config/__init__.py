"""Configuration management for boroughmap.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- AssemblyConfig: Boundary assembly and simplification settings
- ClassifierConfig: Confidence thresholds and ring selection
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- BoroughmapSettings: Main application settings
"""

from boroughmap.config.settings import (
    AssemblyConfig,
    BoroughmapSettings,
    ClassifierConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "AssemblyConfig",
    "BoroughmapSettings",
    "ClassifierConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
