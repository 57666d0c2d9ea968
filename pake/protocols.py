"""
Protocol interfaces for OPRF clients and servers.

The surrounding PAKE drives an OPRF through these interfaces during both
registration and login:

- Client: blind(password) -> state; send state.alpha_bytes()
- Server: evaluate(alpha) -> beta; send beta back
- Client: finalize(password, beta, state) -> 32-byte output

Any implementation matching these shapes can be used interchangeably,
e.g. a hardware-backed server that never exposes its key.
"""

from typing import Any, Protocol, runtime_checkable


# =============================================================================
# State Protocols
# =============================================================================


@runtime_checkable
class BlindState(Protocol):
    """
    Client secret kept between blind and finalize.

    Concrete implementations define how the secret is stored and erased.
    """

    def alpha_bytes(self) -> bytes:
        """Encoded blinded element to send to the server."""
        ...

    def zeroize(self) -> None:
        """Erase the secret and make the state unusable."""
        ...


# =============================================================================
# Protocol Interfaces
# =============================================================================


@runtime_checkable
class OPRFClient(Protocol):
    """
    Protocol for OPRF clients.

    An OPRF client must support:
    1. blind(): hide the input behind a fresh random factor
    2. finalize(): strip the factor from the server reply and derive output
    """

    def blind(self, input: bytes, pepper: bytes | None = None) -> Any:
        """
        Blind an input.

        Args:
            input: Secret client input
            pepper: Optional extra secret salt

        Returns:
            BlindState to keep until finalize()
        """
        ...

    def finalize(self, input: bytes, beta_wire: bytes, state: Any) -> bytes:
        """
        Derive the OPRF output from the server's reply.

        Args:
            input: The input passed to blind()
            beta_wire: Encoded element returned by the server
            state: BlindState returned by blind(); consumed by this call

        Returns:
            32-byte output
        """
        ...


@runtime_checkable
class OPRFServer(Protocol):
    """
    Protocol for OPRF servers.

    An OPRF server holds a secret key and applies it to blinded elements.
    """

    def evaluate(self, alpha_wire: bytes) -> bytes:
        """
        Apply the key to a blinded element.

        Args:
            alpha_wire: Encoded element from the client

        Returns:
            Encoded evaluated element
        """
        ...
