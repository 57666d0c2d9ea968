"""
Primitive interfaces for the OPRF core.

This module defines protocol interfaces for:
- Group: Prime-order group with canonical encodings and hash-to-curve
- RandFunc: Injected cryptographically secure random byte source

Concrete implementations are in pake/oprf/.
"""

from .group import Group
from .rng import RandFunc

__all__ = [
    "Group",
    "RandFunc",
]
