"""Utility functions."""

from meshvet.utils.config import load_config
from meshvet.utils.logging import setup_logging

__all__ = ["load_config", "setup_logging"]
