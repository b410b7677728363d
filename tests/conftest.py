# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import pytest

from forgeaudit.audit.context import AuditContext, RequestMetadata
from forgeaudit.models import PushMirror, Repository, User


@pytest.fixture(autouse=True)
def _reset_recorder():
    """Restore the default recorder singleton between tests."""
    from forgeaudit.audit import recorder

    recorder.set_recorder(None)
    yield
    if recorder._recorder is not None:
        recorder._recorder.close()
    recorder.set_recorder(None)


@pytest.fixture
def doer() -> User:
    return User(id=2, name="Doer")


@pytest.fixture
def user() -> User:
    return User(id=1, name="TestUser")


@pytest.fixture
def repo() -> Repository:
    return Repository(id=3, name="TestRepo", owner_name="TestUser")


@pytest.fixture
def push_mirror() -> PushMirror:
    return PushMirror(id=4)


@pytest.fixture
def request_ctx() -> AuditContext:
    return AuditContext(request=RequestMetadata(remote_addr="127.0.0.1:1234"))
