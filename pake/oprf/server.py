"""
Server implementation for the multiplicative-blinding DH-OPRF.

The server's role is a single scalar multiplication: beta = alpha × k.
It validates alpha before touching the key, since computing on an invalid
or low-order element could leak information about k.

The server never learns the client input, and the client never learns k.
"""

from .params import DEFAULT_PARAMS, Params


def evaluate(alpha_wire: bytes, oprf_key, params: Params = DEFAULT_PARAMS) -> bytes:
    """
    Second OPRF step, run by the server.

    Args:
        alpha_wire: Encoded blinded element from the client
        oprf_key: Server's secret scalar
        params: OPRF parameters

    Returns:
        Encoded beta = alpha × oprf_key

    Raises:
        InvalidPointError: If alpha_wire is not a valid group element
    """
    group = params.group
    alpha = group.element_from_bytes(alpha_wire)
    # SEC: no branching on key bits here; timing is that of scalar_mult
    beta = group.scalar_mult(alpha, oprf_key)
    return group.element_to_bytes(beta)


class Server:
    """
    OPRF server holding a long-lived key.

    The key is read-only after construction, so one Server may answer
    concurrent evaluate() calls. Rotating the key means building a new
    Server; synchronizing that with in-flight calls is up to the caller.
    """

    def __init__(self, oprf_key, params: Params | None = None):
        """
        Initialize server with its OPRF key.

        Args:
            oprf_key: Secret scalar of params.group
            params: OPRF parameters
        """
        self.params = params or DEFAULT_PARAMS
        self._oprf_key = oprf_key

    @classmethod
    def from_key_bytes(cls, key_bytes: bytes, params: Params | None = None) -> "Server":
        """
        Build a server from an encoded key.

        Raises:
            InvalidScalarError: If key_bytes is not a canonical scalar
        """
        params = params or DEFAULT_PARAMS
        return cls(params.group.scalar_from_bytes(key_bytes), params)

    def evaluate(self, alpha_wire: bytes) -> bytes:
        """Answer a blinded element; see evaluate()."""
        return evaluate(alpha_wire, self._oprf_key, self.params)
