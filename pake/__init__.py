"""
PAKE building blocks.

This package provides the oblivious pseudorandom function used by the
password-authenticated key exchange: the client learns PRF(k, password)
from a server holding k, and neither side learns the other's secret.

Modules:
- primitives: Protocol interfaces for groups and entropy sources
- protocols: Protocol interfaces for OPRF clients and servers
- errors: Exception hierarchy
- oprf: Multiplicative-blinding DH-OPRF implementation
"""

from . import errors
from . import primitives
from . import protocols
from . import oprf

__all__ = [
    "errors",
    "primitives",
    "protocols",
    "oprf",
]
