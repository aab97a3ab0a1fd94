"""
Shared helpers: random sources and logging setup.
"""

from .random import make_rng
from .logging import configure_logging

__all__ = ['make_rng', 'configure_logging']
