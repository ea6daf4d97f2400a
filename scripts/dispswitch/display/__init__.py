"""xrandr layout switching: discovery, layouts and the CLI."""

from .manager import DisplayManager
from .cli import main

__all__ = ['DisplayManager', 'main']
