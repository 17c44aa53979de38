"""In-memory implementations of the repository and unit-of-work ports.

Used by API tests to drive the real handlers without a database. The store
is a plain object shared by all repositories of one test; the unit of work
snapshots it and restores the snapshot when the scope raises.
"""

import copy
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.entities import (
    Account,
    AccountCredentials,
    Preferences,
    PreferencesChanges,
    Profile,
    ProfileChanges,
    ResetTicket,
)
from src.domain.errors import IdentityError


@dataclass
class InMemoryStore:
    """Rows keyed by id (accounts, tickets) or account id (profiles, preferences)."""

    accounts: dict[UUID, Account] = field(default_factory=dict)
    password_hashes: dict[UUID, str] = field(default_factory=dict)
    profiles: dict[UUID, Profile] = field(default_factory=dict)
    preferences: dict[UUID, Preferences] = field(default_factory=dict)
    tickets: dict[UUID, ResetTicket] = field(default_factory=dict)
    reads: int = 0


class InMemoryAccountRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, account_id):
        self.store.reads += 1
        return self.store.accounts.get(account_id)

    async def find_by_email(self, email):
        self.store.reads += 1
        return next((a for a in self.store.accounts.values() if a.email == email), None)

    async def find_by_username(self, username):
        self.store.reads += 1
        return next(
            (a for a in self.store.accounts.values() if a.username == username), None
        )

    async def find_credentials_by_email(self, email):
        account = await self.find_by_email(email)
        if account is None:
            return None
        return AccountCredentials(
            account=account, password_hash=self.store.password_hashes[account.id]
        )

    async def create(self, email, username, password_hash):
        for existing in self.store.accounts.values():
            if existing.email == email:
                return Failure(error=IdentityError.EMAIL_TAKEN)
            if existing.username == username:
                return Failure(error=IdentityError.USERNAME_TAKEN)
        now = datetime.now(UTC)
        account = Account(
            id=uuid7(),
            email=email,
            username=username,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        self.store.accounts[account.id] = account
        self.store.password_hashes[account.id] = password_hash
        return Success(value=account)

    async def update_password(self, account_id, password_hash):
        self.store.password_hashes[account_id] = password_hash
        self.store.accounts[account_id].updated_at = datetime.now(UTC)


class InMemoryProfileRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def create(self, account_id):
        now = datetime.now(UTC)
        profile = Profile(
            id=uuid7(),
            account_id=account_id,
            avatar_url=None,
            level=1,
            experience=0,
            wins=0,
            losses=0,
            created_at=now,
            updated_at=now,
        )
        self.store.profiles[account_id] = profile
        return profile

    async def find_by_account_id(self, account_id):
        self.store.reads += 1
        return self.store.profiles.get(account_id)

    async def update(self, account_id, changes: ProfileChanges):
        profile = self.store.profiles.get(account_id)
        if profile is None:
            return None
        updated = replace(profile, **changes.as_dict(), updated_at=datetime.now(UTC))
        self.store.profiles[account_id] = updated
        return updated


class InMemoryPreferencesRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def create(self, account_id):
        now = datetime.now(UTC)
        preferences = Preferences(
            id=uuid7(),
            account_id=account_id,
            notifications_enabled=True,
            language="en",
            theme="light",
            created_at=now,
            updated_at=now,
        )
        self.store.preferences[account_id] = preferences
        return preferences

    async def find_by_account_id(self, account_id):
        self.store.reads += 1
        return self.store.preferences.get(account_id)

    async def update(self, account_id, changes: PreferencesChanges):
        preferences = self.store.preferences.get(account_id)
        if preferences is None:
            return None
        updated = replace(preferences, **changes.as_dict(), updated_at=datetime.now(UTC))
        self.store.preferences[account_id] = updated
        return updated


class InMemoryResetTicketRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, account_id, secret_hash, expires_at):
        ticket = ResetTicket(
            id=uuid7(),
            account_id=account_id,
            secret_hash=secret_hash,
            expires_at=expires_at,
            created_at=datetime.now(UTC),
        )
        self.store.tickets[ticket.id] = ticket
        return ticket

    async def find_active(self, now):
        active = [t for t in self.store.tickets.values() if t.expires_at > now]
        return sorted(active, key=lambda t: (t.created_at, t.id), reverse=True)

    async def consume(self, ticket_id):
        return self.store.tickets.pop(ticket_id, None) is not None


class InMemoryUnitOfWork:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def begin(self):
        snapshot = copy.deepcopy(self.store.__dict__)
        try:
            yield
        except BaseException:
            self.store.__dict__.update(snapshot)
            raise


class RecordingResetTokenDelivery:
    """Keeps delivered secrets so tests can play the part of the mailbox."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    async def send_reset_token(self, email, token):
        self.sent.append((email, token))

    def last_token_for(self, email: str) -> str:
        return next(token for sent_to, token in reversed(self.sent) if sent_to == email)


class RecordingUnitOfWork:
    """Unit of work for handler unit tests: records scopes and rollbacks."""

    def __init__(self) -> None:
        self.scopes = 0
        self.rolled_back = False

    @asynccontextmanager
    async def begin(self):
        self.scopes += 1
        try:
            yield
        except Exception:
            self.rolled_back = True
            raise
