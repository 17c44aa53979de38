"""Integration tests for bcrypt password service.

Tests the BcryptPasswordService with real bcrypt hashing.

Architecture:
- Real bcrypt (cost 10, the minimum accepted, to keep tests fast)
"""

import pytest

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.fixture(scope="module")
def service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=10)


@pytest.mark.integration
class TestBcryptPasswordService:
    def test_hash_verifies_and_wrong_password_does_not(self, service):
        digest = service.hash_password("password123")

        assert digest.startswith("$2b$10$")
        assert service.verify_password("password123", digest) is True
        assert service.verify_password("password124", digest) is False

    def test_same_password_hashes_differently(self, service):
        assert service.hash_password("password123") != service.hash_password("password123")

    def test_unicode_password(self, service):
        digest = service.hash_password("pässwörd-密码")

        assert service.verify_password("pässwörd-密码", digest) is True

    def test_input_limited_to_72_bytes_consistently(self, service):
        base = "a" * 72
        digest = service.hash_password(base + "tail-one")

        assert service.verify_password(base + "tail-two", digest) is True

    @pytest.mark.parametrize("digest", ["", "not-a-bcrypt-hash", "$2b$10$short"])
    def test_malformed_digest_returns_false(self, service, digest):
        assert service.verify_password("password123", digest) is False

    @pytest.mark.parametrize("cost", [9, 21])
    def test_cost_factor_out_of_range_rejected(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
