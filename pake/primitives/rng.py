"""
Entropy source protocol.

Randomness is injected as a pycryptodome-style ``randfunc``: a callable
that takes a byte count and returns exactly that many random bytes. This
is the same shape as ``Crypto.Random.get_random_bytes`` and the
``randfunc`` argument accepted throughout pycryptodome, so production code
passes the library default and tests pass a seeded generator.
"""

from typing import Protocol


class RandFunc(Protocol):
    """
    Cryptographically secure random byte source.

    Implementations must be safe to call from the thread that owns them;
    sharing one source across threads is the source's own concern.
    """

    def __call__(self, n: int) -> bytes:
        """
        Return n random bytes.

        Args:
            n: Number of bytes requested

        Returns:
            Exactly n bytes
        """
        ...
