"""
Prime-order group protocol.

A Group bundles the scalar field and the element type of one concrete
backend (e.g. Ristretto255) behind a fixed capability set. The OPRF steps
only ever talk to a group through this interface, so any backend that
satisfies it structurally can be plugged in without subclassing.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Group(Protocol):
    """
    Prime-order group with canonical encodings.

    Properties:
    - Canonical: element_to_bytes(element_from_bytes(b)) == b for every
      accepted b, and likewise for scalars
    - Deterministic: hash_to_curve returns the same element for the same bytes
    - Validating: decoders raise instead of returning a default value
    """

    name: str
    element_length: int  # ElemLen: size of an encoded element
    scalar_length: int  # Size of an encoded scalar
    uniform_bytes_length: int  # Input size expected by hash_to_curve

    def random_scalar(self, randfunc: Callable[[int], bytes]) -> Any:
        """
        Sample a uniform, invertible scalar.

        Args:
            randfunc: Entropy source returning the requested number of bytes

        Returns:
            Nonzero scalar

        Raises:
            RandomnessFailure: If randfunc fails
        """
        ...

    def scalar_from_bytes(self, data: bytes) -> Any:
        """
        Decode a canonical scalar.

        Raises:
            InvalidScalarError: If data is not a canonical encoding
        """
        ...

    def scalar_to_bytes(self, scalar: Any) -> bytes:
        """Canonical encoding of a scalar."""
        ...

    def scalar_invert(self, scalar: Any) -> Any:
        """
        Multiplicative inverse in the scalar field.

        Raises:
            InvalidScalarError: If scalar is zero
        """
        ...

    def hash_to_curve(self, uniform_bytes: bytes) -> Any:
        """
        Map exactly uniform_bytes_length pseudorandom bytes to an element.
        """
        ...

    def element_from_bytes(self, data: bytes) -> Any:
        """
        Decode and validate an element.

        Raises:
            InvalidPointError: If data is not a valid group element
        """
        ...

    def element_to_bytes(self, element: Any) -> bytes:
        """Canonical encoding of an element."""
        ...

    def scalar_mult(self, element: Any, scalar: Any) -> Any:
        """Compute element × scalar."""
        ...
