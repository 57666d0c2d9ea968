"""
Ristretto255 group for the OPRF.

Adapts the point and scalar classes of ``oblivious.ristretto`` to the Group
protocol. Arithmetic is delegated to oblivious (libsodium through rbcl when
available, pure Python otherwise); this module owns sampling, canonical
decoding and validation.

Encodings:
- Scalar: 32 bytes little-endian, canonical iff value < ORDER
- Element: 32-byte Ristretto encoding, canonical iff it is the unique
  encoding produced by the encoder (non-negative field element < 2^255 - 19)

hash_to_curve(u) applies the Ristretto one-way map to SHA-512(u), which is
exactly what oblivious' point.hash does.
"""

from collections.abc import Callable

import ge25519
from oblivious.ristretto import point, scalar

from ..errors import InvalidPointError, InvalidScalarError
from .utils import ensure_bytes, random_bytes

# 2^252 + 27742317777372353535851937790883648493
ORDER = (1 << 252) + 27742317777372353535851937790883648493
FIELD_PRIME = (1 << 255) - 19

IDENTITY_BYTES = bytes(32)


class Ristretto255:
    """
    Ristretto255 prime-order group.

    Stateless; use the shared RISTRETTO255 instance.
    """

    name = "ristretto255"
    element_length = 32
    scalar_length = 32
    uniform_bytes_length = 64

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def random_scalar(self, randfunc: Callable[[int], bytes]) -> scalar:
        """
        Sample a uniform nonzero scalar by rejection.

        Each draw is masked to 253 bits, so a candidate is accepted with
        probability about 1/2.
        """
        while True:
            candidate = bytearray(random_bytes(randfunc, self.scalar_length))
            candidate[-1] &= 0x1F
            value = int.from_bytes(candidate, "little")
            if 0 < value < ORDER:
                return scalar(bytes(candidate))

    def scalar_from_bytes(self, data: bytes) -> scalar:
        data = ensure_bytes("scalar", data)
        if len(data) != self.scalar_length:
            raise InvalidScalarError(
                f"scalar must be {self.scalar_length} bytes, got {len(data)}"
            )
        if int.from_bytes(data, "little") >= ORDER:
            raise InvalidScalarError("scalar is not canonically encoded")
        return scalar(data)

    def scalar_to_bytes(self, s: scalar) -> bytes:
        return bytes(s)

    def scalar_invert(self, s: scalar) -> scalar:
        if int.from_bytes(bytes(s), "little") % ORDER == 0:
            raise InvalidScalarError("cannot invert the zero scalar")
        return ~s

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    def hash_to_curve(self, uniform_bytes: bytes) -> point:
        uniform_bytes = ensure_bytes("uniform_bytes", uniform_bytes)
        if len(uniform_bytes) != self.uniform_bytes_length:
            raise ValueError(
                f"hash_to_curve expects {self.uniform_bytes_length} bytes, "
                f"got {len(uniform_bytes)}"
            )
        return point.hash(uniform_bytes)

    def element_from_bytes(self, data: bytes) -> point:
        """
        Decode a received element.

        Rejects wrong lengths, non-canonical encodings, encodings that do not
        decode to a point, and the identity.
        """
        data = ensure_bytes("element", data)
        if len(data) != self.element_length:
            raise InvalidPointError(
                f"element must be {self.element_length} bytes, got {len(data)}"
            )
        value = int.from_bytes(data, "little")
        if value >= FIELD_PRIME or value & 1:
            raise InvalidPointError("element is not canonically encoded")
        if data == IDENTITY_BYTES:
            raise InvalidPointError("element is the identity")
        if ge25519.ge25519_p3.from_bytes_ristretto255(data) is None:
            raise InvalidPointError("bytes do not encode a ristretto255 point")
        return point(data)

    def element_to_bytes(self, element: point) -> bytes:
        return bytes(element)

    def scalar_mult(self, element: point, s: scalar) -> point:
        return s * element

    def __repr__(self) -> str:
        return "Ristretto255()"


RISTRETTO255 = Ristretto255()
