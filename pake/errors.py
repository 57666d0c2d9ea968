"""
Error taxonomy for the OPRF core.

Every failure is raised to the immediate caller; nothing here is retried.
The decode errors also derive from ValueError so callers that already
guard input validation with ``except ValueError`` keep working.
"""


class PakeError(Exception):
    """Base class for errors raised by the pake package."""


class InvalidScalarError(PakeError, ValueError):
    """Bytes do not decode to a canonical scalar, or the scalar is not invertible."""


class InvalidPointError(PakeError, ValueError):
    """Bytes do not decode to a valid element of the prime-order group."""


class RandomnessFailure(PakeError, RuntimeError):
    """The injected entropy source failed to produce output."""
