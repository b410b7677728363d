# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for entity descriptor resolution."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from forgeaudit.audit.descriptors import (
    EntityType,
    TypeDescriptor,
    describe_scope,
    describe_target,
    supported_scope_types,
    supported_target_types,
)
from forgeaudit.core.exceptions import ForgeAuditError, UnsupportedEntityError
from forgeaudit.models import (
    AccessToken,
    AuthenticationSource,
    EmailAddress,
    ExternalLoginUser,
    GPGKey,
    OAuth2Application,
    OAuth2Grant,
    Organization,
    ProtectedBranch,
    ProtectedTag,
    PublicKey,
    PushMirror,
    RepoTransfer,
    Repository,
    Secret,
    Team,
    TwoFactor,
    User,
    UserOpenID,
    WebAuthnCredential,
    Webhook,
)

# (entity, expected type, expected primary key, expected friendly name)
TARGET_CASES: list[tuple[Any, EntityType, int, str]] = [
    (User(id=1, name="TestUser"), EntityType.USER, 1, "TestUser"),
    (Organization(id=2, name="TestOrg"), EntityType.ORGANIZATION, 2, "TestOrg"),
    (EmailAddress(id=3, email="user@example.com"), EntityType.EMAIL_ADDRESS, 3, "user@example.com"),
    (
        Repository(id=3, name="TestRepo", owner_name="TestUser"),
        EntityType.REPOSITORY,
        3,
        "TestUser/TestRepo",
    ),
    (Team(id=4, name="TestTeam"), EntityType.TEAM, 4, "TestTeam"),
    (TwoFactor(id=5), EntityType.TWO_FACTOR, 5, ""),
    (
        WebAuthnCredential(id=6, name="TestCredential"),
        EntityType.WEBAUTHN_CREDENTIAL,
        6,
        "TestCredential",
    ),
    (UserOpenID(id=7, uri="test://uri"), EntityType.OPENID, 7, "test://uri"),
    (AccessToken(id=8, name="TestToken"), EntityType.ACCESS_TOKEN, 8, "TestToken"),
    (
        OAuth2Application(id=9, name="TestOAuth2Application"),
        EntityType.OAUTH2_APPLICATION,
        9,
        "TestOAuth2Application",
    ),
    (OAuth2Grant(id=10), EntityType.OAUTH2_GRANT, 10, ""),
    (
        AuthenticationSource(id=11, name="TestSource"),
        EntityType.AUTHENTICATION_SOURCE,
        11,
        "TestSource",
    ),
    (
        ExternalLoginUser(external_id="12", login_source_id=11),
        EntityType.EXTERNAL_LOGIN,
        11,
        "12",
    ),
    (PublicKey(id=13, fingerprint="TestPublicKey"), EntityType.PUBLIC_KEY, 13, "TestPublicKey"),
    (GPGKey(id=14, key_id="TestGPGKey"), EntityType.GPG_KEY, 14, "TestGPGKey"),
    (Secret(id=15, name="TestSecret"), EntityType.SECRET, 15, "TestSecret"),
    (Webhook(id=16, url="test://webhook"), EntityType.WEBHOOK, 16, "test://webhook"),
    (
        ProtectedTag(id=17, name_pattern="TestProtectedTag"),
        EntityType.PROTECTED_TAG,
        17,
        "TestProtectedTag",
    ),
    (
        ProtectedBranch(id=18, rule_name="TestProtectedBranch"),
        EntityType.PROTECTED_BRANCH,
        18,
        "TestProtectedBranch",
    ),
    (PushMirror(id=19), EntityType.PUSH_MIRROR, 19, ""),
    (RepoTransfer(id=20), EntityType.REPO_TRANSFER, 20, ""),
]


def _case_id(case: tuple[Any, EntityType, int, str]) -> str:
    return type(case[0]).__name__


# ---------------------------------------------------------------------------
# Target resolution
# ---------------------------------------------------------------------------


class TestDescribeTarget:
    @pytest.mark.parametrize(
        ("entity", "entity_type", "primary_key", "friendly_name"),
        TARGET_CASES,
        ids=[_case_id(c) for c in TARGET_CASES],
    )
    def test_supported_entity(
        self, entity: Any, entity_type: EntityType, primary_key: int, friendly_name: str
    ) -> None:
        expected = TypeDescriptor(
            type=entity_type,
            primary_key=primary_key,
            friendly_name=friendly_name,
            target=entity,
        )
        assert describe_target(entity) == expected

    def test_target_keeps_original_reference(self) -> None:
        team = Team(id=4, name="TestTeam")
        assert describe_target(team).target is team

    def test_table_covers_every_supported_type(self) -> None:
        assert {type(c[0]) for c in TARGET_CASES} == supported_target_types()

    def test_every_entity_type_but_system_is_reachable(self) -> None:
        reached = {c[1] for c in TARGET_CASES}
        assert reached == set(EntityType) - {EntityType.SYSTEM}

    def test_none_is_rejected(self) -> None:
        with pytest.raises(UnsupportedEntityError):
            describe_target(None)

    @pytest.mark.parametrize("ref", [1234, "TestUser", {"id": 1, "name": "x"}, object()])
    def test_unknown_type_is_rejected(self, ref: Any) -> None:
        with pytest.raises(UnsupportedEntityError) as exc_info:
            describe_target(ref)
        assert exc_info.value.role == "target"
        assert exc_info.value.ref is ref

    def test_subclass_is_rejected(self) -> None:
        class Bot(User):
            pass

        with pytest.raises(UnsupportedEntityError):
            describe_target(Bot(id=1, name="bot"))

    def test_misuse_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            describe_target(1234)
        with pytest.raises(ForgeAuditError):
            describe_target(1234)


# ---------------------------------------------------------------------------
# Scope resolution
# ---------------------------------------------------------------------------


class TestDescribeScope:
    def test_none_is_system(self) -> None:
        assert describe_scope(None) == TypeDescriptor(
            type=EntityType.SYSTEM, primary_key=0, friendly_name="System"
        )

    def test_system_has_no_target(self) -> None:
        assert describe_scope(None).target is None

    @pytest.mark.parametrize(
        ("scope", "entity_type", "primary_key", "friendly_name"),
        [
            (User(id=1, name="TestUser"), EntityType.USER, 1, "TestUser"),
            (Organization(id=2, name="TestOrg"), EntityType.ORGANIZATION, 2, "TestOrg"),
            (
                Repository(id=3, name="TestRepo", owner_name="TestUser"),
                EntityType.REPOSITORY,
                3,
                "TestUser/TestRepo",
            ),
        ],
        ids=["user", "organization", "repository"],
    )
    def test_supported_scope(
        self, scope: Any, entity_type: EntityType, primary_key: int, friendly_name: str
    ) -> None:
        assert describe_scope(scope) == TypeDescriptor(
            type=entity_type,
            primary_key=primary_key,
            friendly_name=friendly_name,
            target=scope,
        )

    def test_scope_types(self) -> None:
        assert supported_scope_types() == {User, Organization, Repository}

    def test_team_is_not_a_scope(self) -> None:
        with pytest.raises(UnsupportedEntityError) as exc_info:
            describe_scope(Team(id=345, name="Repo345"))
        assert exc_info.value.role == "scope"

    @pytest.mark.parametrize("ref", [1234, Secret(id=1, name="s"), PushMirror(id=4)])
    def test_non_scope_is_rejected(self, ref: Any) -> None:
        with pytest.raises(UnsupportedEntityError):
            describe_scope(ref)


# ---------------------------------------------------------------------------
# TypeDescriptor model
# ---------------------------------------------------------------------------


class TestTypeDescriptor:
    def test_is_immutable(self) -> None:
        descriptor = describe_target(User(id=1, name="TestUser"))
        with pytest.raises(ValidationError):
            descriptor.friendly_name = "Other"  # type: ignore[misc]

    def test_target_is_not_serialized(self) -> None:
        data = describe_target(User(id=1, name="TestUser")).model_dump(mode="json")
        assert data == {"type": "user", "primary_key": 1, "friendly_name": "TestUser"}

    def test_is_hashable(self) -> None:
        descriptor = describe_target(User(id=1, name="TestUser"))
        assert hash(descriptor) == hash(describe_target(User(id=1, name="TestUser")))
        assert len({descriptor, describe_scope(None), describe_target(User(id=2, name="Doer"))}) == 3

    def test_equality_ignores_target_reference(self) -> None:
        first = describe_target(User(id=1, name="TestUser"))
        second = describe_target(User(id=1, name="TestUser", email="other@example.com"))
        assert first.target is not second.target
        assert first == second
        assert first != describe_target(User(id=1, name="Renamed"))
        assert first != "user"
