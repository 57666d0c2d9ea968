"""
Parameters for the OPRF scheme.

Key parameters:
- group: Prime-order group the protocol runs in (default Ristretto255)
- blind_hash: Hash for the HKDF-Extract that turns the client input into
  hash_to_curve input; its digest size must equal the group's
  uniform_bytes_length

Fixed choices:
- FINALIZE_HASH: HKDF-Extract hash of the finalize step, always SHA-256
- OUTPUT_LENGTH: OPRF output size, always 32 bytes regardless of group
"""

from dataclasses import dataclass, field
from types import ModuleType

from Crypto.Hash import SHA256, SHA512

from ..primitives import Group
from .ristretto import RISTRETTO255

FINALIZE_HASH = SHA256
OUTPUT_LENGTH = FINALIZE_HASH.digest_size


@dataclass(frozen=True)
class Params:
    """Parameters for the multiplicative-blinding OPRF."""

    group: Group = field(default=RISTRETTO255)
    blind_hash: ModuleType = field(default=SHA512)  # pycryptodome hash module

    def __post_init__(self):
        if not isinstance(self.group, Group):
            raise ValueError("group does not implement the Group protocol")
        digest_size = getattr(self.blind_hash, "digest_size", None)
        if digest_size is None or not hasattr(self.blind_hash, "new"):
            raise ValueError("blind_hash must be a pycryptodome hash module")
        # SEC: hash_to_curve input must be full-width output of the extract step
        if digest_size != self.group.uniform_bytes_length:
            raise ValueError(
                f"blind_hash digest size ({digest_size}) must equal "
                f"group.uniform_bytes_length ({self.group.uniform_bytes_length})"
            )

    @property
    def element_length(self) -> int:
        """Size of an encoded group element on the wire."""
        return self.group.element_length

    @property
    def scalar_length(self) -> int:
        """Size of an encoded scalar."""
        return self.group.scalar_length

    @property
    def output_length(self) -> int:
        """Size of the OPRF output. Always 32."""
        return OUTPUT_LENGTH

    def __repr__(self) -> str:
        hash_name = self.blind_hash.__name__.rsplit(".", 1)[-1]
        return (
            f"Params(group={self.group.name}, blind_hash={hash_name}, "
            f"element_length={self.element_length}, "
            f"output_length={self.output_length})"
        )


DEFAULT_PARAMS = Params()
