"""
Client-side OPRF state.
"""

from typing import Any

from ..primitives import Group


class OprfClientState:
    """
    Secret state kept by the client between blind() and finalize().

    Holds the blinded element alpha, which is sent to the server, and the
    blinding factor, which never leaves the client. The blinding factor is
    stored as a mutable byte buffer so zeroize() can overwrite it; the
    state is single-use and becomes unusable once zeroized.

    Use as a context manager to guarantee zeroization if the exchange is
    abandoned:

        with client.blind(password) as state:
            beta = send(state.alpha_bytes())
            output = client.finalize(password, beta, state)
    """

    __slots__ = ("alpha", "_group", "_blinding_factor", "_consumed")

    def __init__(self, alpha: Any, blinding_factor: Any, group: Group):
        self.alpha = alpha
        self._group = group
        self._blinding_factor = bytearray(group.scalar_to_bytes(blinding_factor))
        self._consumed = False

    @property
    def consumed(self) -> bool:
        """True once the blinding factor has been used or zeroized."""
        return self._consumed

    @property
    def blinding_factor(self) -> Any:
        """The secret blinding scalar r."""
        if self._consumed:
            raise RuntimeError("OPRF client state already consumed")
        return self._group.scalar_from_bytes(bytes(self._blinding_factor))

    def alpha_bytes(self) -> bytes:
        """Wire encoding of alpha, the only part of the state sent to the server."""
        return self._group.element_to_bytes(self.alpha)

    def zeroize(self) -> None:
        """Overwrite the blinding factor and mark the state consumed."""
        for i in range(len(self._blinding_factor)):
            self._blinding_factor[i] = 0
        self._consumed = True

    def __enter__(self) -> "OprfClientState":
        return self

    def __exit__(self, *args) -> None:
        self.zeroize()

    def __repr__(self) -> str:
        status = "consumed" if self._consumed else "live"
        return f"OprfClientState(alpha={self.alpha_bytes().hex()}, {status})"
