"""Tests for the SQLAlchemy passport store."""
import pytest

from passport_login.core.exceptions import PassportConflictError
from passport_login.models.models import Member, Passport
from passport_login.services.oauth import PassportStore


@pytest.fixture
def store(db_session):
    return PassportStore(db_session)


def test_find_returns_none_for_unknown_pair(store):
    assert store.find("ProviderName", "123456789") is None


def test_create_persists_member_and_passport(store, db_session):
    member = Member(email="ada@example.com", oauth_source="ProviderName")

    passport = store.create("ProviderName", "123456789", member)

    assert member.id is not None
    assert passport.member_id == member.id
    assert passport.identifier == "123456789"
    assert store.find("ProviderName", "123456789").id == member.id


def test_numeric_identifier_is_stored_as_string(store):
    member = Member()
    store.create("ProviderName", 42, member)  # type: ignore[arg-type]

    assert store.find("ProviderName", "42").id == member.id


def test_same_identifier_under_other_provider_is_distinct(store):
    first = Member()
    second = Member()
    store.create("google", "1", first)
    store.create("github", "1", second)

    assert store.find("google", "1").id == first.id
    assert store.find("github", "1").id == second.id


def test_duplicate_pair_raises_conflict(store, db_session):
    store.create("ProviderName", "123456789", Member())

    with pytest.raises(PassportConflictError) as excinfo:
        store.create("ProviderName", "123456789", Member())

    assert excinfo.value.status_code == 409
    assert db_session.query(Passport).count() == 1
    assert db_session.query(Member).count() == 1


def test_member_may_link_several_providers(store):
    member = Member(email="ada@example.com")
    store.create("google", "g-1", member)
    store.create("github", "gh-1", member)

    passports = store.passports_for(member)

    assert [(p.provider, p.identifier) for p in passports] == [("google", "g-1"), ("github", "gh-1")]


def test_deleting_member_removes_passports(store, db_session):
    member = Member()
    store.create("ProviderName", "123456789", member)

    db_session.delete(member)
    db_session.commit()

    assert db_session.query(Passport).count() == 0
    assert store.find("ProviderName", "123456789") is None
