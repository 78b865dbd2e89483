"""Tests for fixture_testkit.testkit.normalize.

Verifies id promotion to ``_id`` and flattening of ``links`` into the
document root.
"""

import copy

import pytest

from fixture_testkit.testkit import normalize_fixture_docs

pytestmark = pytest.mark.unit


class TestIdPromotion:
    """Documents carrying an ``id``."""

    def test_renames_id_to_underscore_id(self) -> None:
        docs = normalize_fixture_docs([{"id": "w1", "name": "sprocket"}])

        assert docs == [{"_id": "w1", "name": "sprocket"}]

    def test_flattens_links_into_document_root(self) -> None:
        docs = normalize_fixture_docs(
            [{"id": "w1", "name": "sprocket", "links": {"owner": "u1", "bin": "b7"}}]
        )

        assert docs == [{"_id": "w1", "name": "sprocket", "owner": "u1", "bin": "b7"}]
        assert "links" not in docs[0]

    def test_link_values_override_existing_root_keys(self) -> None:
        docs = normalize_fixture_docs(
            [{"id": "w1", "owner": "stale", "links": {"owner": "u1"}}]
        )

        assert docs[0]["owner"] == "u1"

    def test_falsy_id_is_still_promoted(self) -> None:
        docs = normalize_fixture_docs([{"id": 0}])

        assert docs == [{"_id": 0}]


class TestInputShapes:
    """Single documents, lists and tuples."""

    def test_single_document_becomes_one_element_list(self) -> None:
        doc = {"id": "c1", "title": "Spring catalog"}

        docs = normalize_fixture_docs(doc)

        assert docs == [{"_id": "c1", "title": "Spring catalog"}]
        assert docs[0] is doc

    def test_list_is_mutated_in_place(self) -> None:
        original = [{"id": "w1"}, {"id": "w2"}]

        docs = normalize_fixture_docs(original)

        assert docs is original
        assert original == [{"_id": "w1"}, {"_id": "w2"}]

    def test_tuple_is_returned_as_list(self) -> None:
        docs = normalize_fixture_docs(({"id": "w1"}, {"id": "w2"}))

        assert docs == [{"_id": "w1"}, {"_id": "w2"}]

    def test_empty_list(self) -> None:
        assert normalize_fixture_docs([]) == []


class TestDocumentsWithoutId:
    """Documents lacking ``id`` pass through untouched."""

    def test_document_without_id_is_unchanged(self) -> None:
        doc = {"name": "gear", "links": {"owner": "u3"}}
        expected = copy.deepcopy(doc)

        assert normalize_fixture_docs([doc]) == [expected]

    def test_normalizing_twice_is_a_no_op(self) -> None:
        docs = normalize_fixture_docs(
            [{"id": "w1", "links": {"owner": "u1"}}, {"name": "gear"}]
        )
        once = copy.deepcopy(docs)

        assert normalize_fixture_docs(docs) == once

    def test_non_mapping_links_are_left_in_place(self) -> None:
        docs = normalize_fixture_docs([{"id": "w1", "links": None}])

        assert docs == [{"_id": "w1", "links": None}]
