"""
Multiplicative-blinding DH-OPRF, the password-hardening step of the PAKE.

Three steps across two parties:
- blind (client): input -> alpha = H(input) × r, keeping r secret
- evaluate (server): alpha -> beta = alpha × k
- finalize (client): beta -> Extract(beta × r⁻¹ || input)

The client obtains a PRF of its input under the server's key without
revealing the input, and without learning the key.

The key components:
- Params: Group and hash configuration
- Ristretto255: Default prime-order group
- OprfClientState: Single-use client secret between blind and finalize
- Client / Server: Stateful wrappers around the three steps
"""

from .params import DEFAULT_PARAMS, FINALIZE_HASH, OUTPUT_LENGTH, Params
from .ristretto import RISTRETTO255, Ristretto255
from .state import OprfClientState
from .client import Client, blind, finalize, hash_input, unblind
from .server import Server, evaluate


def create_params(**kwargs) -> Params:
    """
    Create OPRF parameters.

    Args:
        **kwargs: group, blind_hash

    Returns:
        Configured Params
    """
    return Params(**kwargs)


__all__ = [
    "Params",
    "DEFAULT_PARAMS",
    "FINALIZE_HASH",
    "OUTPUT_LENGTH",
    "Ristretto255",
    "RISTRETTO255",
    "OprfClientState",
    "Client",
    "Server",
    "blind",
    "evaluate",
    "finalize",
    "hash_input",
    "unblind",
    "create_params",
]
