"""
Configuration Management

This module provides centralized configuration management
for the property dashboard application.
"""

from .settings import Settings, ListViewConfig, GestureConfig, AppConfig, get_settings
from .environment import Environment, EnvironmentManager

__all__ = [
    "Settings",
    "ListViewConfig",
    "GestureConfig",
    "AppConfig",
    "get_settings",
    "Environment",
    "EnvironmentManager",
]
