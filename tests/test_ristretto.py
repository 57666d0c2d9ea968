"""Tests for the Ristretto255 group adapter."""

import secrets

import pytest

from pake.errors import InvalidPointError, InvalidScalarError
from pake.oprf.ristretto import IDENTITY_BYTES, ORDER, RISTRETTO255

from helpers import GENERATOR_HEX, ScriptedRandFunc, SeededRandFunc, find_invalid_encoding


class TestScalars:
    """Scalar sampling, encoding and inversion."""

    def test_random_scalar_is_canonical_and_nonzero(self):
        for _ in range(20):
            s = RISTRETTO255.random_scalar(secrets.token_bytes)
            value = int.from_bytes(RISTRETTO255.scalar_to_bytes(s), "little")
            assert 0 < value < ORDER

    def test_random_scalar_rejects_zero_and_out_of_range(self):
        valid = (12345).to_bytes(32, "little")
        randfunc = ScriptedRandFunc([bytes(32), b"\xff" * 32, valid])

        s = RISTRETTO255.random_scalar(randfunc)

        assert randfunc.calls == 3
        assert RISTRETTO255.scalar_to_bytes(s) == valid

    def test_random_scalar_deterministic_with_seed(self):
        a = RISTRETTO255.random_scalar(SeededRandFunc(b"seed"))
        b = RISTRETTO255.random_scalar(SeededRandFunc(b"seed"))
        assert RISTRETTO255.scalar_to_bytes(a) == RISTRETTO255.scalar_to_bytes(b)

    def test_scalar_roundtrip(self):
        data = (ORDER - 1).to_bytes(32, "little")
        s = RISTRETTO255.scalar_from_bytes(data)
        assert RISTRETTO255.scalar_to_bytes(s) == data

    def test_zero_scalar_decodes(self):
        """Zero is canonical; only inversion rejects it."""
        zero = RISTRETTO255.scalar_from_bytes(bytes(32))
        with pytest.raises(InvalidScalarError):
            RISTRETTO255.scalar_invert(zero)

    @pytest.mark.parametrize("data", [
        ORDER.to_bytes(32, "little"),
        b"\xff" * 32,
        bytes(range(1, 33)),
        bytes(31),
        bytes(33),
    ])
    def test_non_canonical_scalar_rejected(self, data):
        with pytest.raises(InvalidScalarError):
            RISTRETTO255.scalar_from_bytes(data)

    def test_invert(self):
        s = RISTRETTO255.random_scalar(secrets.token_bytes)
        s_inv = RISTRETTO255.scalar_invert(s)
        assert int.from_bytes(bytes(s), "little") * int.from_bytes(bytes(s_inv), "little") % ORDER == 1


class TestElements:
    """Element hashing, decoding and multiplication."""

    def test_hash_to_curve_deterministic(self):
        u = secrets.token_bytes(64)
        p1 = RISTRETTO255.element_to_bytes(RISTRETTO255.hash_to_curve(u))
        p2 = RISTRETTO255.element_to_bytes(RISTRETTO255.hash_to_curve(u))
        assert p1 == p2
        assert len(p1) == RISTRETTO255.element_length

    def test_hash_to_curve_wrong_length(self):
        with pytest.raises(ValueError):
            RISTRETTO255.hash_to_curve(bytes(32))

    def test_hashed_element_roundtrip(self):
        element = RISTRETTO255.hash_to_curve(secrets.token_bytes(64))
        data = RISTRETTO255.element_to_bytes(element)
        decoded = RISTRETTO255.element_from_bytes(data)
        assert RISTRETTO255.element_to_bytes(decoded) == data

    def test_generator_decodes(self):
        data = bytes.fromhex(GENERATOR_HEX)
        assert RISTRETTO255.element_to_bytes(RISTRETTO255.element_from_bytes(data)) == data

    def test_identity_rejected(self):
        with pytest.raises(InvalidPointError, match="identity"):
            RISTRETTO255.element_from_bytes(IDENTITY_BYTES)

    def test_negative_encoding_rejected(self):
        generator = bytearray.fromhex(GENERATOR_HEX)
        generator[0] |= 1
        with pytest.raises(InvalidPointError, match="canonical"):
            RISTRETTO255.element_from_bytes(bytes(generator))

    def test_out_of_field_rejected(self):
        p_bytes = ((1 << 255) - 19).to_bytes(32, "little")
        with pytest.raises(InvalidPointError, match="canonical"):
            RISTRETTO255.element_from_bytes(p_bytes)

    def test_invalid_encoding_rejected(self):
        with pytest.raises(InvalidPointError):
            RISTRETTO255.element_from_bytes(find_invalid_encoding())

    def test_wrong_length_rejected(self):
        with pytest.raises(InvalidPointError):
            RISTRETTO255.element_from_bytes(bytes.fromhex(GENERATOR_HEX)[:31])

    def test_non_bytes_rejected(self):
        with pytest.raises(TypeError):
            RISTRETTO255.element_from_bytes(GENERATOR_HEX)

    def test_scalar_mult_commutes(self):
        element = RISTRETTO255.hash_to_curve(secrets.token_bytes(64))
        a = RISTRETTO255.random_scalar(secrets.token_bytes)
        b = RISTRETTO255.random_scalar(secrets.token_bytes)

        ab = RISTRETTO255.scalar_mult(RISTRETTO255.scalar_mult(element, a), b)
        ba = RISTRETTO255.scalar_mult(RISTRETTO255.scalar_mult(element, b), a)
        assert RISTRETTO255.element_to_bytes(ab) == RISTRETTO255.element_to_bytes(ba)

    def test_scalar_mult_by_inverse(self):
        element = RISTRETTO255.hash_to_curve(secrets.token_bytes(64))
        s = RISTRETTO255.random_scalar(secrets.token_bytes)

        blinded = RISTRETTO255.scalar_mult(element, s)
        unblinded = RISTRETTO255.scalar_mult(blinded, RISTRETTO255.scalar_invert(s))
        assert RISTRETTO255.element_to_bytes(unblinded) == RISTRETTO255.element_to_bytes(element)
