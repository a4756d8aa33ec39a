"""
Shared helpers
"""

from .logging import WorldLogAdapter, get_logger

__all__ = ['WorldLogAdapter', 'get_logger']
