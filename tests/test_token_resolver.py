"""Tests for TokenResolver find-or-create behaviour.

The provider is an AsyncMock so only the resolver's own logic is exercised;
the passport store runs against the in-memory test database.
"""
from unittest.mock import AsyncMock, Mock

import pytest

from passport_login.core.exceptions import IdentityLookupError
from passport_login.models.models import Member, Passport
from passport_login.services.oauth import (
    GenericOAuthProvider,
    MemberMapperFactory,
    OAuthUserInfoError,
    PassportStore,
    PassthroughMemberMapper,
    ResourceOwner,
    TokenResolver,
)


def _provider(owner: ResourceOwner) -> Mock:
    provider = Mock()
    provider.name = "ProviderName"
    provider.get_resource_owner = AsyncMock(return_value=owner)
    return provider


@pytest.fixture
def owner():
    return ResourceOwner(id=123456789, email="ada@example.com", first_name="Ada", last_name="Lovelace")


@pytest.fixture
def store(db_session):
    return PassportStore(db_session)


@pytest.fixture
def resolver(store):
    return TokenResolver(store, MemberMapperFactory())


@pytest.mark.asyncio
async def test_new_identifier_creates_member_and_passport(resolver, owner, db_session):
    provider = _provider(owner)

    member = await resolver.resolve("token", provider, "ProviderName")

    provider.get_resource_owner.assert_awaited_once_with("token")
    assert member.id is not None
    assert member.oauth_source == "ProviderName"
    assert member.email == "ada@example.com"

    passport = member.passports[0]
    assert passport.provider == "ProviderName"
    assert passport.identifier == "123456789"
    assert db_session.query(Passport).count() == 1


@pytest.mark.asyncio
async def test_same_identifier_resolves_to_same_member(resolver, owner, db_session):
    first = await resolver.resolve("token-1", _provider(owner), "ProviderName")
    second = await resolver.resolve("token-2", _provider(owner), "ProviderName")

    assert second.id == first.id
    assert db_session.query(Passport).count() == 1
    assert db_session.query(Member).count() == 1


@pytest.mark.asyncio
async def test_mapper_only_runs_on_creation(store, owner):
    mapper = Mock(wraps=PassthroughMemberMapper())
    factory = MemberMapperFactory()
    factory.register("ProviderName", mapper)
    resolver = TokenResolver(store, factory)

    await resolver.resolve("token", _provider(owner), "ProviderName")
    await resolver.resolve("token", _provider(owner), "ProviderName")

    assert mapper.map.call_count == 1


@pytest.mark.asyncio
async def test_mapper_is_resolved_by_provider_name(store, owner):
    factory = Mock()
    factory.for_provider.return_value = PassthroughMemberMapper()
    resolver = TokenResolver(store, factory)

    await resolver.resolve("token", _provider(owner), "ProviderName")

    factory.for_provider.assert_called_once_with("ProviderName")


def test_passthrough_mapper_returns_new_member_unchanged(owner):
    store = Mock()
    mapper = Mock()
    mapper.map.side_effect = lambda member, resource_owner: member
    factory = Mock()
    factory.for_provider.return_value = mapper
    resolver = TokenResolver(store, factory)

    member = resolver.create_member(owner, "ProviderName")

    mapped_member, mapped_owner = mapper.map.call_args.args
    assert mapped_member is member
    assert isinstance(member, Member)
    assert mapped_owner is owner
    assert member.email is None
    assert member.oauth_source == "ProviderName"
    store.create.assert_called_once_with("ProviderName", "123456789", member)


@pytest.mark.asyncio
async def test_lookup_failure_creates_nothing(resolver, db_session):
    provider = Mock()
    provider.get_resource_owner = AsyncMock(side_effect=OAuthUserInfoError("User info fetch failed: 500"))

    with pytest.raises(IdentityLookupError) as excinfo:
        await resolver.resolve("token", provider, "ProviderName")

    assert excinfo.value.details["provider"] == "ProviderName"
    assert db_session.query(Member).count() == 0
    assert db_session.query(Passport).count() == 0


@pytest.mark.asyncio
async def test_concurrent_creation_returns_existing_member(store, owner, db_session, monkeypatch):
    existing = Member(email="first@example.com")
    store.create("ProviderName", "123456789", existing)
    existing_id = existing.id

    real_find = store.find
    calls = []

    def racing_find(provider, identifier):
        # First lookup misses, as if another request inserted in between
        calls.append((provider, identifier))
        if len(calls) == 1:
            return None
        return real_find(provider, identifier)

    monkeypatch.setattr(store, "find", racing_find)
    resolver = TokenResolver(store, MemberMapperFactory())

    member = await resolver.resolve("token", _provider(owner), "ProviderName")

    assert member.id == existing_id
    assert len(calls) == 2
    assert db_session.query(Passport).count() == 1
    assert db_session.query(Member).count() == 1


@pytest.mark.asyncio
async def test_non_object_user_info_is_a_lookup_error(resolver, db_session):
    provider = GenericOAuthProvider(name="ProviderName", user_info_url="https://id.example.com/userinfo")
    provider.get_user_info = AsyncMock(return_value=["not", "an", "object"])

    with pytest.raises(IdentityLookupError):
        await resolver.resolve("token", provider, "ProviderName")

    assert db_session.query(Member).count() == 0
