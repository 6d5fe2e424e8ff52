"""
Core module for the orderfees package.

This module provides the foundational components used throughout the package:
- Exception classes organized by domain
- Enum definitions for order and fee constants
"""

from .exceptions import *
from .enums import *

from .exceptions import __all__ as exceptions_all
from .enums import __all__ as enums_all

__all__ = []
__all__.extend(exceptions_all)
__all__.extend(enums_all)
