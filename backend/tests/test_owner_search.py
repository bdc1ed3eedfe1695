"""Tests for the owner last-name search."""

import pytest
from sqlalchemy.orm import Session

from petclinic.core.outcomes import ListPage, NotFound, SingleMatch
from petclinic.db.models import Owner
from petclinic.repositories.owners import OwnerRepository
from petclinic.services.owner_search import OwnerSearch


@pytest.fixture
def search(db: Session) -> OwnerSearch:
    return OwnerSearch(OwnerRepository(db), page_size=5)


def test_several_matches_give_a_list_page(search):
    outcome = search.resolve("Davis")
    assert isinstance(outcome, ListPage)
    assert [o.first_name for o in outcome.items] == ["Betty", "Harold"]
    assert outcome.current_page == 1
    assert outcome.total_pages == 1
    assert outcome.total_items == 2


def test_single_match_gives_owner_id(search, franklin):
    assert search.resolve("Franklin") == SingleMatch(franklin.id)


def test_no_match(search):
    outcome = search.resolve("NonExistent")
    assert isinstance(outcome, NotFound)
    assert outcome.key == "NonExistent"


@pytest.mark.parametrize("last_name", [None, ""])
def test_empty_filter_matches_everyone(search, last_name):
    outcome = search.resolve(last_name)
    assert isinstance(outcome, ListPage)
    assert outcome.total_items == 10
    assert outcome.total_pages == 2
    assert len(outcome.items) == 5


def test_second_page(search):
    first = search.resolve(None, 1)
    second = search.resolve(None, 2)
    assert second.current_page == 2
    assert len(second.items) == 5
    assert {o.id for o in first.items}.isdisjoint(o.id for o in second.items)


def test_items_ordered_by_id(search):
    outcome = search.resolve(None, 1)
    ids = [o.id for o in outcome.items]
    assert ids == sorted(ids)


def test_page_past_the_end_is_an_empty_list_page(search):
    outcome = search.resolve(None, 999)
    assert isinstance(outcome, ListPage)
    assert outcome.items == []
    assert outcome.current_page == 999
    assert outcome.total_pages == 2
    assert outcome.total_items == 10


def test_single_match_ignores_page_number(search, franklin):
    assert search.resolve("Franklin", 3) == SingleMatch(franklin.id)


def test_prefix_match(search):
    outcome = search.resolve("Dav")
    assert isinstance(outcome, ListPage)
    assert outcome.total_items == 2


def test_wildcards_are_literal(search):
    assert isinstance(search.resolve("%"), NotFound)
    assert isinstance(search.resolve("D_vis"), NotFound)


def test_whitespace_kept_by_default(search):
    assert isinstance(search.resolve("  Davis  "), NotFound)


def test_whitespace_trimmed_when_enabled(db):
    search = OwnerSearch(OwnerRepository(db), trim_whitespace=True)
    assert isinstance(search.resolve("  Davis  "), ListPage)


def test_whitespace_only_filter_matches_everyone_when_trimmed(db):
    search = OwnerSearch(OwnerRepository(db), trim_whitespace=True)
    assert search.resolve("   ").total_items == 10


def test_case_sensitive_by_default(search):
    assert isinstance(search.resolve("DAVIS"), NotFound)


def test_case_insensitive_when_enabled(db):
    search = OwnerSearch(OwnerRepository(db), case_sensitive=False)
    outcome = search.resolve("DAVIS")
    assert isinstance(outcome, ListPage)
    assert outcome.total_items == 2


def test_page_size_is_configurable(db):
    search = OwnerSearch(OwnerRepository(db), page_size=3)
    outcome = search.resolve(None, 4)
    assert outcome.total_pages == 4
    assert len(outcome.items) == 1


def test_new_owner_is_found(db, search):
    owner = OwnerRepository(db).save(
        Owner(first_name="Jane", last_name="Zimmermann", address="1 Elm St", city="Madison", telephone="6085550000")
    )
    assert search.resolve("Zimmermann") == SingleMatch(owner.id)


def test_same_input_same_outcome(search):
    first = search.resolve("Davis", 1)
    second = search.resolve("Davis", 1)
    assert [o.id for o in first.items] == [o.id for o in second.items]
    assert (first.current_page, first.total_pages, first.total_items) == (
        second.current_page,
        second.total_pages,
        second.total_items,
    )


def test_case_insensitive_match_on_non_ascii_names(db):
    owner = OwnerRepository(db).save(
        Owner(first_name="Ayse", last_name="Öztürk", address="2 Elm St", city="Madison", telephone="6085550001")
    )
    search = OwnerSearch(OwnerRepository(db), case_sensitive=False)
    assert search.resolve("öz") == SingleMatch(owner.id)
    assert search.resolve("ÖZTÜRK") == SingleMatch(owner.id)


def test_case_sensitive_match_on_non_ascii_names(db, search):
    owner = OwnerRepository(db).save(
        Owner(first_name="Ayse", last_name="Öztürk", address="2 Elm St", city="Madison", telephone="6085550001")
    )
    assert search.resolve("Öz") == SingleMatch(owner.id)
    assert isinstance(search.resolve("öz"), NotFound)


def test_renamed_owner_found_by_new_name(db, franklin):
    franklin.last_name = "Frankenstein"
    OwnerRepository(db).save(franklin)
    search = OwnerSearch(OwnerRepository(db), case_sensitive=False)
    assert search.resolve("frankenst") == SingleMatch(franklin.id)
    assert franklin.last_name_folded == "frankenstein"
