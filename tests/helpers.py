"""
Test helper functions.
"""

import hashlib

import ge25519
from Crypto.Hash import HMAC, SHA256, SHA512
from oblivious.ristretto import point, scalar

# Fixed server key: 1..31 followed by a zero byte, a canonical scalar
TEST_KEY = bytes(range(1, 32)) + b"\x00"

# Ristretto255 generator
GENERATOR_HEX = "e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76"


class SeededRandFunc:
    """
    Deterministic randfunc using SHAKE-256 in counter mode.

    Same seed produces the same byte sequence. Counts calls so tests can
    check how many draws a sampler made.
    """

    def __init__(self, seed: bytes):
        self._seed = seed
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        data = hashlib.shake_256(self._seed + self.calls.to_bytes(8, "little")).digest(n)
        self.calls += 1
        return data


class ScriptedRandFunc:
    """randfunc returning pre-set outputs in order."""

    def __init__(self, outputs: list[bytes]):
        self._outputs = list(outputs)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        return self._outputs.pop(0)


def direct_prf(input: bytes, key: bytes, pepper: bytes | None = None) -> bytes:
    """
    Reference PRF computed with no blinding at all.

    Extract(SHA-512) -> hash to group -> multiply by key -> Extract(SHA-256).
    """
    salt = pepper or bytes(SHA512.digest_size)
    hashed_input = HMAC.new(salt, msg=input, digestmod=SHA512).digest()
    res = scalar(key) * point.hash(hashed_input)
    ikm = bytes(res) + input
    return HMAC.new(bytes(SHA256.digest_size), msg=ikm, digestmod=SHA256).digest()


def find_invalid_encoding() -> bytes:
    """Smallest canonical-looking (even, < p) encoding that is not a point."""
    for value in range(2, 512, 2):
        encoding = value.to_bytes(32, "little")
        if ge25519.ge25519_p3.from_bytes_ristretto255(encoding) is None:
            return encoding
    raise AssertionError("no invalid encoding found")
