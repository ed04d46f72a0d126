"""Unit tests for PasswordHashingService."""

import pytest

from gatekeeper_auth.services import PasswordHashingService


class TestPasswordHashing:
    """Tests for hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        # Low rounds keep the suite fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_is_not_plaintext(self):
        password = "Str0ng!Pass"

        hashed = self.service.hash(password)

        assert hashed != password
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self):
        """Each hash carries a fresh salt."""
        password = "Str0ng!Pass"

        first = self.service.hash(password)
        second = self.service.hash(password)

        assert first != second
        assert self.service.verify(password, first)
        assert self.service.verify(password, second)

    def test_verify_wrong_password(self):
        hashed = self.service.hash("Str0ng!Pass")

        assert self.service.verify("wrong", hashed) is False

    def test_verify_is_case_sensitive(self):
        hashed = self.service.hash("Str0ng!Pass")

        assert self.service.verify("str0ng!pass", hashed) is False

    def test_verify_unicode_password(self):
        password = "pässwört-密码-🔐"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$tooshort"])
    def test_verify_malformed_hash_returns_false(self, bad_hash):
        assert self.service.verify("Str0ng!Pass", bad_hash) is False

    def test_long_password_is_accepted(self):
        """Secrets past the 72-byte bcrypt limit hash without error."""
        password = "A1!" + "x" * 200

        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)


class TestWorkFactor:
    """Tests for the configurable work factor."""

    def test_default_rounds(self):
        assert PasswordHashingService().rounds == 10

    def test_hash_embeds_rounds(self):
        service = PasswordHashingService(rounds=5)

        hashed = service.hash("Str0ng!Pass")

        assert hashed.split("$")[2] == "05"

    def test_needs_rehash_when_rounds_change(self):
        old_hash = PasswordHashingService(rounds=4).hash("Str0ng!Pass")

        assert PasswordHashingService(rounds=4).needs_rehash(old_hash) is False
        assert PasswordHashingService(rounds=5).needs_rehash(old_hash) is True

    def test_needs_rehash_for_garbage(self):
        assert PasswordHashingService(rounds=4).needs_rehash("garbage") is True


class TestDummyVerification:
    """Tests for the timing-equalization helper."""

    def test_verify_dummy_always_false(self):
        service = PasswordHashingService(rounds=4)

        assert service.verify_dummy("anything") is False
        assert service.verify_dummy("") is False

    def test_dummy_hash_is_cached(self):
        service = PasswordHashingService(rounds=4)

        service.verify_dummy("first")
        cached = service._dummy_hash
        service.verify_dummy("second")

        assert cached is not None
        assert service._dummy_hash == cached
