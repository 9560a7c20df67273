"""Unit tests for BcryptPasswordEncoder."""

from accounts.domain.value import Password


class TestBcryptPasswordEncoder:
    def test_encrypt_and_match(self, encoder):
        hashed = encoder.encrypt(Password.of_raw("ValidPass123!"))

        assert hashed.value != "ValidPass123!"
        assert hashed.value.startswith("$2b$04$")
        assert encoder.matches("ValidPass123!", hashed.value)

    def test_hashes_are_salted(self, encoder):
        raw = Password.of_raw("ValidPass123!")

        assert encoder.encrypt(raw).value != encoder.encrypt(raw).value

    def test_wrong_password_does_not_match(self, encoder):
        hashed = encoder.encrypt(Password.of_raw("ValidPass123!"))

        assert not encoder.matches("ValidPass124!", hashed.value)

    def test_malformed_hash_does_not_raise(self, encoder):
        assert not encoder.matches("ValidPass123!", "not-a-bcrypt-hash")
        assert not encoder.matches("ValidPass123!", "")
        assert not encoder.matches("", "$2b$04$abc")
