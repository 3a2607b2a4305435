"""
Pytest fixtures for filecms tests.
"""

from pathlib import Path

import pytest

from filecms.config import Settings
from filecms.kernel.events import AuditChannel, AuditTrail
from filecms.kernel.identity import CredentialLedger
from filecms.kernel.models import Principal, UserRole
from filecms.kernel.storage import FileContentStore, ManagedFileIndex
from filecms.orchestration import AccessController


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a per-test temporary data directory."""
    return Settings(data_dir=tmp_path)


@pytest.fixture
def audit_channel() -> AuditChannel:
    """An audit channel with no subscribers."""
    return AuditChannel()


@pytest.fixture
def audit_trail(audit_channel: AuditChannel) -> AuditTrail:
    """An in-memory subscriber recording everything published."""
    trail = AuditTrail()
    audit_channel.subscribe(trail)
    return trail


@pytest.fixture
def ledger(settings: Settings, audit_channel: AuditChannel) -> CredentialLedger:
    return CredentialLedger(settings.users_path, audit_channel)


@pytest.fixture
def file_index(settings: Settings) -> ManagedFileIndex:
    return ManagedFileIndex(settings.index_path)


@pytest.fixture
def content_store(settings: Settings) -> FileContentStore:
    return FileContentStore(settings.content_path)


@pytest.fixture
def controller(
    file_index: ManagedFileIndex,
    content_store: FileContentStore,
    audit_channel: AuditChannel,
) -> AccessController:
    return AccessController(
        index=file_index,
        content_store=content_store,
        audit_channel=audit_channel,
    )


@pytest.fixture
def admin() -> Principal:
    return Principal(username="alice", role=UserRole.ADMIN)


@pytest.fixture
def editor() -> Principal:
    return Principal(username="bob", role=UserRole.EDITOR)


@pytest.fixture
def viewer() -> Principal:
    return Principal(username="carol", role=UserRole.VIEWER)
