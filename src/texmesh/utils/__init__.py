"""Shared helpers for the texmesh package."""

from .logging_utils import LOGGER_NAME, Timer

__all__ = ['LOGGER_NAME', 'Timer']
