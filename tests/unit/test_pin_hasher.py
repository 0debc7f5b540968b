"""Unit tests for auth/pin_hasher.py: PIN generation, hashing and verification."""

from banking.auth.pin_hasher import (
    PIN_LENGTH,
    dummy_pin_hash,
    generate_pin,
    hash_pin,
    verify_pin,
)


class TestGeneratePin:
    def test_default_length_is_six_digits(self):
        pin = generate_pin()
        assert len(pin) == PIN_LENGTH == 6
        assert pin.isdigit()

    def test_custom_length(self):
        assert len(generate_pin(10)) == 10

    def test_pins_vary(self):
        pins = {generate_pin() for _ in range(50)}
        assert len(pins) > 1


class TestHashAndVerify:
    def test_verify_accepts_matching_pin(self):
        digest = hash_pin("123456")
        assert verify_pin("123456", digest)

    def test_verify_rejects_wrong_pin(self):
        digest = hash_pin("123456")
        assert not verify_pin("654321", digest)

    def test_hash_is_salted(self):
        """Same PIN hashed twice gives two different digests that both verify."""
        first = hash_pin("424242")
        second = hash_pin("424242")
        assert first != second
        assert verify_pin("424242", first)
        assert verify_pin("424242", second)

    def test_digest_does_not_contain_pin(self):
        assert "987123" not in hash_pin("987123")

    def test_malformed_digest_returns_false(self):
        assert verify_pin("123456", "not-a-bcrypt-hash") is False

    def test_empty_digest_returns_false(self):
        assert verify_pin("123456", "") is False

    def test_overlong_input_returns_false(self):
        digest = hash_pin("123456")
        assert verify_pin("1" * 200, digest) is False


class TestDummyHash:
    def test_dummy_hash_is_cached(self):
        assert dummy_pin_hash() is dummy_pin_hash()

    def test_dummy_hash_is_a_real_digest(self):
        assert dummy_pin_hash().startswith("$2")
