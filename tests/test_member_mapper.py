"""Tests for member mappers and the provider-keyed mapper factory."""
import pytest

from passport_login.core.config import settings
from passport_login.models.models import Member
from passport_login.services.oauth import (
    GenericMemberMapper,
    MemberMapperFactory,
    PassthroughMemberMapper,
    ResourceOwner,
)
from passport_login.services.oauth.mappers import create_mapper_factory


@pytest.fixture
def owner():
    return ResourceOwner(
        id="123456789",
        email="ada@example.com",
        first_name="Ada",
        last_name="Lovelace",
        attributes={"company": "Analytical Engines"},
    )


def test_default_mapping_copies_profile_fields(owner):
    member = GenericMemberMapper().map(Member(), owner)

    assert member.email == "ada@example.com"
    assert member.first_name == "Ada"
    assert member.surname == "Lovelace"


def test_custom_mapping_reads_raw_attributes(owner):
    mapper = GenericMemberMapper({"surname": "company"})

    member = mapper.map(Member(), owner)

    assert member.surname == "Analytical Engines"
    assert member.email is None


def test_blank_values_do_not_overwrite():
    member = Member(email="kept@example.com")
    owner = ResourceOwner(id="1", email="  ")

    GenericMemberMapper().map(member, owner)

    assert member.email == "kept@example.com"


def test_display_name_is_split_when_no_first_name():
    owner = ResourceOwner(id="1", name="Grace Brewster Hopper")

    member = GenericMemberMapper().map(Member(), owner)

    assert member.first_name == "Grace"
    assert member.surname == "Brewster Hopper"


def test_unknown_member_field_is_rejected():
    with pytest.raises(ValueError, match="nickname"):
        GenericMemberMapper({"nickname": "name"})


def test_passthrough_returns_same_object(owner):
    member = Member()

    assert PassthroughMemberMapper().map(member, owner) is member
    assert member.email is None


def test_factory_returns_registered_mapper():
    factory = MemberMapperFactory()
    custom = PassthroughMemberMapper()
    factory.register("ProviderName", custom)

    assert factory.for_provider("ProviderName") is custom


def test_factory_falls_back_to_default():
    factory = MemberMapperFactory()

    assert isinstance(factory.for_provider("unknown"), GenericMemberMapper)
    assert factory.for_provider("unknown") is factory.default


def test_create_mapper_factory_uses_settings(monkeypatch, owner):
    monkeypatch.setattr(settings, "OAUTH_MEMBER_MAPPINGS", {"github": {"email": "email"}})

    factory = create_mapper_factory()
    mapper = factory.for_provider("github")

    assert mapper is not factory.default
    member = mapper.map(Member(), owner)
    assert member.email == "ada@example.com"
    assert member.first_name is None
