"""
Utility functions for the OPRF scheme.

Includes:
- hkdf_extract: HKDF-Extract (RFC 5869) over any pycryptodome hash module
- random_bytes: Checked draw from an injected randfunc
- ensure_bytes: Input type guard shared by the client and server steps
"""

from types import ModuleType

from Crypto.Hash import HMAC

from ..errors import RandomnessFailure
from ..primitives import RandFunc


def hkdf_extract(hash_module: ModuleType, ikm: bytes, salt: bytes | None = None) -> bytes:
    """
    HKDF-Extract: PRK = HMAC-Hash(salt, IKM).

    An absent or empty salt is replaced by HashLen zero bytes, as RFC 5869
    prescribes.

    Args:
        hash_module: pycryptodome hash module (e.g. Crypto.Hash.SHA512)
        ikm: Input keying material
        salt: Optional salt

    Returns:
        Pseudorandom key of hash_module.digest_size bytes
    """
    if not salt:
        salt = bytes(hash_module.digest_size)
    return HMAC.new(bytes(salt), msg=bytes(ikm), digestmod=hash_module).digest()


def random_bytes(randfunc: RandFunc, n: int) -> bytes:
    """
    Draw n bytes from randfunc.

    Any exception from the source, or a short/long/non-bytes result, is
    reported as RandomnessFailure. The draw is not retried.
    """
    try:
        data = randfunc(n)
    except Exception as exc:
        raise RandomnessFailure(f"randomness source failed: {exc}") from exc
    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        raise RandomnessFailure(f"randomness source did not return {n} bytes")
    return bytes(data)


def ensure_bytes(name: str, value) -> bytes:
    """Return value as bytes, or raise TypeError if it is not bytes-like."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes")
    return bytes(value)
