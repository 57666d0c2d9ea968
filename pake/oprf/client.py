"""
Client implementation for the multiplicative-blinding DH-OPRF.

The client's role:
1. Blind the input: alpha = H(input) × r for a fresh random scalar r
2. Send alpha to the server and receive beta = alpha × k
3. Unblind and finalize: output = Extract(beta × r⁻¹ || input)

Since beta × r⁻¹ = H(input) × k, the output depends only on the input and
the server key, never on r. The server only ever sees alpha, which is a
uniformly random group element independent of the input.
"""

from Crypto.Random import get_random_bytes

from ..primitives import RandFunc
from .params import DEFAULT_PARAMS, FINALIZE_HASH, Params
from .state import OprfClientState
from .utils import ensure_bytes, hkdf_extract


def hash_input(input: bytes, pepper: bytes | None = None, params: Params = DEFAULT_PARAMS):
    """
    Map the input to its base point H(input).

    The input is first run through HKDF-Extract with the optional pepper as
    salt, producing uniform_bytes_length bytes for hash_to_curve.
    """
    input = ensure_bytes("input", input)
    if pepper is not None:
        pepper = ensure_bytes("pepper", pepper)
    hashed_input = hkdf_extract(params.blind_hash, input, salt=pepper)
    return params.group.hash_to_curve(hashed_input)


def blind(
    input: bytes,
    pepper: bytes | None = None,
    randfunc: RandFunc | None = None,
    params: Params = DEFAULT_PARAMS,
) -> OprfClientState:
    """
    First OPRF step, run by the client.

    Args:
        input: Secret client input (e.g. a password)
        pepper: Optional extra secret mixed in as HKDF salt
        randfunc: Entropy source for the blinding factor
                  (default: Crypto.Random.get_random_bytes)
        params: OPRF parameters

    Returns:
        OprfClientState holding alpha and the blinding factor

    Raises:
        RandomnessFailure: If randfunc fails
    """
    group = params.group
    base_point = hash_input(input, pepper, params)
    blinding_factor = group.random_scalar(randfunc or get_random_bytes)
    alpha = group.scalar_mult(base_point, blinding_factor)
    return OprfClientState(alpha, blinding_factor, group)


def unblind(beta, blinding_factor, params: Params = DEFAULT_PARAMS):
    """
    Remove the blinding factor: beta × r⁻¹.

    Raises:
        InvalidScalarError: If blinding_factor is zero
    """
    group = params.group
    return group.scalar_mult(beta, group.scalar_invert(blinding_factor))


def finalize(
    input: bytes,
    beta_wire: bytes,
    blinding_factor,
    params: Params = DEFAULT_PARAMS,
) -> bytes:
    """
    Third OPRF step, run by the client on the server's reply.

    Args:
        input: The same input that was blinded
        beta_wire: Encoded element returned by the server
        blinding_factor: Scalar r from the matching blind() call
        params: OPRF parameters

    Returns:
        32-byte OPRF output

    Raises:
        InvalidPointError: If beta_wire is not a valid element
        InvalidScalarError: If blinding_factor is zero
    """
    input = ensure_bytes("input", input)
    group = params.group
    beta = group.element_from_bytes(beta_wire)
    unblinded = unblind(beta, blinding_factor, params)
    ikm = group.element_to_bytes(unblinded) + input
    return hkdf_extract(FINALIZE_HASH, ikm)


class Client:
    """
    OPRF client.

    Stateless between invocations: every blind() returns its own
    OprfClientState, so one Client may run any number of concurrent
    exchanges as long as each state is finalized at most once.
    """

    def __init__(self, params: Params | None = None, randfunc: RandFunc | None = None):
        self.params = params or DEFAULT_PARAMS
        self._randfunc = randfunc or get_random_bytes

    def blind(self, input: bytes, pepper: bytes | None = None) -> OprfClientState:
        """Blind input; send state.alpha_bytes() to the server."""
        return blind(input, pepper, self._randfunc, self.params)

    def finalize(self, input: bytes, beta_wire: bytes, state: OprfClientState) -> bytes:
        """
        Unblind the server's reply and derive the output.

        The state is zeroized whether or not finalization succeeds.

        Raises:
            RuntimeError: If state was already consumed
        """
        try:
            blinding_factor = state.blinding_factor
            return finalize(input, beta_wire, blinding_factor, self.params)
        finally:
            state.zeroize()
