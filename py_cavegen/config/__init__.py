"""
Configuration modules for cave generation.
"""

from .config import Settings, settings
from .map_config import MapConfig

__all__ = ['MapConfig', 'Settings', 'settings']
