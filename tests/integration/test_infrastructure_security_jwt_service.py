"""Integration tests for JWT token codec.

Tests the JWTService implementation with real PyJWT operations.

Architecture:
- Tests against real PyJWT (no mocking)
- Verifies Result type error handling
- TTL boundaries checked with freezegun
- Security properties (tampering, wrong secret, type confusion)
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.domain.errors import IdentityError
from src.infrastructure.security.jwt_service import JWTService
from tests.conftest import TEST_SECRET_KEY


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET_KEY)


@pytest.mark.integration
class TestJWTServiceConstruction:
    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="x" * 31)


@pytest.mark.integration
class TestJWTServiceIssue:
    def test_issued_token_round_trips_identity(self, service):
        user_id = uuid7()

        token = service.generate_access_token(user_id, "alice@example.com", "alice")
        result = service.verify(token)

        assert isinstance(result, Success)
        claims = result.value
        assert claims.user_id == user_id
        assert claims.email == "alice@example.com"
        assert claims.username == "alice"
        assert claims.token_type is TokenType.ACCESS

    def test_payload_contains_standard_claims(self, service):
        token = service.generate_refresh_token(uuid7(), "alice@example.com", "alice")

        payload = jwt.decode(token, TEST_SECRET_KEY, algorithms=["HS256"])

        assert payload["type"] == "refresh"
        assert {"sub", "email", "username", "iat", "exp", "jti"} <= payload.keys()

    def test_each_token_has_unique_jti(self, service):
        user_id = uuid7()
        tokens = [
            service.generate_access_token(user_id, "alice@example.com", "alice")
            for _ in range(5)
        ]

        jtis = {jwt.decode(t, TEST_SECRET_KEY, algorithms=["HS256"])["jti"] for t in tokens}
        assert len(jtis) == 5

    @freeze_time("2026-03-01 12:00:00")
    def test_default_ttls(self, service):
        access = service.verify(
            service.generate_access_token(uuid7(), "alice@example.com", "alice")
        )
        refresh = service.verify(
            service.generate_refresh_token(uuid7(), "alice@example.com", "alice")
        )

        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        assert access.value.expires_at == now + timedelta(hours=24)
        assert refresh.value.expires_at == now + timedelta(days=7)


@pytest.mark.integration
class TestJWTServiceExpiry:
    def test_valid_just_before_ttl_and_expired_just_after(self, service):
        ttl = timedelta(minutes=15)
        with freeze_time("2026-03-01 12:00:00") as frozen:
            token = service.issue(
                uuid7(), "alice@example.com", "alice", TokenType.ACCESS, ttl=ttl
            )

            frozen.tick(ttl - timedelta(seconds=1))
            assert isinstance(service.verify(token), Success)

            frozen.tick(timedelta(seconds=2))
            assert service.verify(token) == Failure(error=IdentityError.EXPIRED_TOKEN)


@pytest.mark.integration
class TestJWTServiceRejection:
    def test_wrong_secret_is_invalid(self, service):
        other = JWTService(secret_key="y" * 32)
        token = other.generate_access_token(uuid7(), "alice@example.com", "alice")

        assert service.verify(token) == Failure(error=IdentityError.INVALID_TOKEN)

    def test_tampered_payload_is_invalid(self, service):
        token = service.generate_access_token(uuid7(), "alice@example.com", "alice")
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload[:-2]}xx.{signature}"

        assert service.verify(tampered) == Failure(error=IdentityError.INVALID_TOKEN)

    @pytest.mark.parametrize("garbage", ["", "not-a-jwt", "a.b.c"])
    def test_malformed_is_invalid(self, service, garbage):
        assert service.verify(garbage) == Failure(error=IdentityError.INVALID_TOKEN)

    def test_missing_identity_claims_is_invalid(self, service):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode(
            {"sub": str(uuid7()), "iat": now, "exp": now + 60},
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        assert service.verify(token) == Failure(error=IdentityError.INVALID_TOKEN)

    def test_non_uuid_subject_is_invalid(self, service):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode(
            {
                "sub": "42",
                "email": "alice@example.com",
                "username": "alice",
                "type": "access",
                "iat": now,
                "exp": now + 60,
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        assert service.verify(token) == Failure(error=IdentityError.INVALID_TOKEN)

    def test_refresh_token_rejected_where_access_expected(self, service):
        token = service.generate_refresh_token(uuid7(), "alice@example.com", "alice")

        result = service.verify(token, expected_type=TokenType.ACCESS)

        assert result == Failure(error=IdentityError.INVALID_TOKEN)

    def test_access_token_rejected_where_refresh_expected(self, service):
        token = service.generate_access_token(uuid7(), "alice@example.com", "alice")

        result = service.verify(token, expected_type=TokenType.REFRESH)

        assert result == Failure(error=IdentityError.INVALID_TOKEN)


@pytest.mark.integration
class TestJWTServiceDecode:
    def test_decode_reads_expired_token(self, service):
        with freeze_time("2020-03-01 12:00:00"):
            token = service.generate_access_token(uuid7(), "alice@example.com", "alice")

        claims = service.decode(token)

        assert claims is not None
        assert claims.username == "alice"
        assert isinstance(service.verify(token), Failure)

    def test_decode_garbage_returns_none(self, service):
        assert service.decode("not-a-jwt") is None
