"""Query translation: mode clause shape and the deleted-record exclusion."""

import pytest

from street_archive.application.services.query_translator import (
    build_search_query,
    deleted_exclusion,
)
from street_archive.domain.enums import SearchMode
from street_archive.domain.street_fields import SEARCHABLE_FIELDS


def test_free_mode_matches_main_name_only() -> None:
    """Free mode is a tokenized match on שם ראשי."""
    expression = build_search_query("הרצל", SearchMode.FREE)
    assert expression["bool"]["must"] == [{"match": {"שם ראשי": "הרצל"}}]


def test_exact_mode_is_or_multi_match_over_all_searchable_fields() -> None:
    expression = build_search_query("בלפור ויצמן", SearchMode.EXACT)
    (clause,) = expression["bool"]["must"]
    assert clause == {
        "multi_match": {
            "query": "בלפור ויצמן",
            "fields": list(SEARCHABLE_FIELDS),
            "operator": "or",
            "type": "best_fields",
        }
    }


def test_full_mode_is_phrase_multi_match() -> None:
    expression = build_search_query("מנחם (מנדל)", SearchMode.FULL)
    (clause,) = expression["bool"]["must"]
    assert clause["multi_match"]["type"] == "phrase"
    assert clause["multi_match"]["query"] == "מנחם (מנדל)"
    assert clause["multi_match"]["fields"] == list(SEARCHABLE_FIELDS)
    assert "operator" not in clause["multi_match"]


@pytest.mark.parametrize("mode", list(SearchMode))
def test_every_mode_excludes_deleted_records(mode: SearchMode) -> None:
    """must_not always carries the deleted=true term, whatever the mode."""
    expression = build_search_query("x", mode)
    assert expression["bool"]["must_not"] == [{"term": {"deleted": True}}]
    assert deleted_exclusion() == {"term": {"deleted": True}}


def test_searchable_fields_order_is_fixed() -> None:
    assert SEARCHABLE_FIELDS == (
        "שם ראשי",
        "תואר",
        "שם מישני",
        "קבוצה",
        "קבוצה נוספת",
        "סוג",
        "קוד",
        "שכונה",
    )


def test_query_text_cannot_replace_the_exclusion() -> None:
    """Query text is only a match value; structure is unchanged by its content."""
    hostile = '"}}, "must_not": []'
    expression = build_search_query(hostile, SearchMode.EXACT)
    assert expression["bool"]["must"][0]["multi_match"]["query"] == hostile
    assert expression["bool"]["must_not"] == [deleted_exclusion()]


def test_empty_query_still_builds_expression() -> None:
    """A query sanitized down to '' still yields a well-formed expression."""
    expression = build_search_query("", SearchMode.FREE)
    assert expression["bool"]["must"] == [{"match": {"שם ראשי": ""}}]
