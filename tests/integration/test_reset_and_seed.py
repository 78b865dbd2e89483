"""Integration tests for reset_database, seed_resource and insert_docs.

Runs the testkit against the widget application's SQLite database.
"""

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from fixture_testkit import normalize_fixture_docs

pytestmark = pytest.mark.integration


async def _table_names(database) -> set[str]:
    async with database.engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


async def _index_names(database, table: str) -> set[str]:
    async with database.engine.connect() as conn:
        indexes = await conn.run_sync(lambda c: inspect(c).get_indexes(table))
    return {index["name"] for index in indexes}


class TestResetDatabase:
    async def test_removes_every_document(self, testkit, widget_app, adapter) -> None:
        await adapter.create("widgets", {"_id": "w1", "name": "sprocket"})
        await adapter.create("locked_records", {"_id": "l1", "label": "x"})

        await testkit.reset_database(widget_app)

        assert await adapter.count("widgets") == 0
        assert await adapter.count("locked_records") == 0

    async def test_recreates_tables_and_indexes(
        self, testkit, widget_app, database
    ) -> None:
        await testkit.reset_database(widget_app)

        assert await _table_names(database) == {"widgets", "locked_records"}
        assert "ix_widgets_name" in await _index_names(database, "widgets")

    async def test_drops_tables_no_model_owns(
        self, testkit, widget_app, database
    ) -> None:
        async with database.engine.begin() as conn:
            await conn.execute(text("CREATE TABLE stray (id INTEGER PRIMARY KEY)"))

        await testkit.reset_database(widget_app)

        assert "stray" not in await _table_names(database)

    async def test_returns_the_handle(self, testkit, widget_app) -> None:
        assert await testkit.reset_database(widget_app) is widget_app


class TestSeeding:
    async def test_seed_resource_from_fixtures(
        self, testkit, fixtures, widget_app, adapter
    ) -> None:
        docs = normalize_fixture_docs(fixtures["widgets"])

        created = await testkit.seed_resource(widget_app, "widgets", docs)

        assert len(created) == 3
        stored = {doc["_id"]: doc for doc in await adapter.fetch_all("widgets")}
        assert stored["w1"]["owner"] == "u1"
        assert stored["w2"]["owner"] == "u2"

    async def test_seed_resource_leaves_fixtures_untouched(
        self, testkit, fixtures, widget_app
    ) -> None:
        records = normalize_fixture_docs(fixtures["locked_records"])

        await testkit.seed_resource(widget_app, "locked_records", records)

        assert records[0] == {"_id": "lock-1", "label": "record 1"}

    async def test_insert_docs_through_resource_collection(
        self, testkit, fixtures, widget_app, adapter
    ) -> None:
        docs = normalize_fixture_docs(fixtures["locked_records"])

        count = await testkit.insert_docs(adapter.resource("locked_records"), docs)

        assert count == 3
        assert await adapter.count("locked_records") == 3

    async def test_insert_docs_fails_on_duplicate(
        self, testkit, widget_app, adapter
    ) -> None:
        await adapter.create("widgets", {"_id": "w1", "name": "a"})

        with pytest.raises(IntegrityError):
            await testkit.insert_docs(
                adapter.resource("widgets"), [{"_id": "w1", "name": "again"}]
            )
