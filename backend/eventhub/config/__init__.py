"""
Configuration module initialization.
Exports configuration components for use throughout the application.
"""

from eventhub.config.settings import settings

__all__ = ["settings"]
