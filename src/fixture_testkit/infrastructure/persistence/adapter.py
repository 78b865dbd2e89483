"""SQLAlchemy implementation of the database adapter contract.

Wraps a ``Database`` and the declarative base whose models make up the
application's resources. Resources are addressed by table name
(``"widgets"``) or by model class name (``"WidgetModel"``).

Documents are mappings keyed by column name. Keys are translated to mapped
attribute names before the model is built, so a model whose ``id`` attribute
lives in column ``_id`` accepts ``{"_id": ...}`` directly. Keys that are
neither a column name nor an attribute name make model construction fail
with SQLAlchemy's own error.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Table, func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase

from fixture_testkit.core.errors import UnknownResourceError
from fixture_testkit.infrastructure.persistence.database import Database


def _column_to_attribute(model: type) -> dict[str, str]:
    mapper = sa_inspect(model)
    return {prop.columns[0].name: prop.key for prop in mapper.column_attrs}


def instance_to_document(instance: Any) -> dict[str, Any]:
    """Read a mapped instance back as a column-keyed document."""
    mapper = sa_inspect(type(instance))
    return {
        prop.columns[0].name: getattr(instance, prop.key)
        for prop in mapper.column_attrs
    }


@dataclass(frozen=True, slots=True)
class ResourceCollection:
    """One resource bound to its adapter.

    Satisfies ``ResourceModelProtocol`` so it can be handed to
    ``FixtureTestKit.insert_docs``.
    """

    adapter: "SQLAlchemyAdapter"
    name: str

    async def create(self, doc: Mapping[str, Any]) -> dict[str, Any]:
        return await self.adapter.create(self.name, doc)


class SQLAlchemyAdapter:
    """Database adapter over an async SQLAlchemy engine.

    Attributes:
        database: Connection and session management.
        base: Declarative base the resource models are registered on.

    Example:
        adapter = SQLAlchemyAdapter(Database(url), Base)
        await adapter.await_ready()
        await adapter.create("widgets", {"_id": "w1", "name": "sprocket"})
    """

    def __init__(self, database: Database, base: type[DeclarativeBase]) -> None:
        self.database = database
        self.base = base

    async def await_ready(self) -> None:
        await self.database.await_connection()

    async def drop_database(self) -> None:
        await self.database.drop_database()

    def list_models(self) -> list[type]:
        """Return every table-owning model, parents before dependents.

        Order follows foreign-key dependencies so tables can be re-created
        one after another.
        """
        by_table: dict[Table, type] = {}
        for mapper in self.base.registry.mappers:
            if mapper.single or not isinstance(mapper.local_table, Table):
                continue
            by_table[mapper.local_table] = mapper.class_
        return [
            by_table[table]
            for table in self.base.metadata.sorted_tables
            if table in by_table
        ]

    async def ensure_indexes(self, model: type) -> None:
        await self.database.create_table(model.__table__)

    def model_for(self, resource: str) -> type:
        """Resolve a resource name to its model.

        Raises:
            UnknownResourceError: If no model matches by table or class name.
        """
        models = self.list_models()
        for model in models:
            if model.__tablename__ == resource or model.__name__ == resource:
                return model
        raise UnknownResourceError(resource, [m.__tablename__ for m in models])

    def resource(self, name: str) -> ResourceCollection:
        self.model_for(name)
        return ResourceCollection(adapter=self, name=name)

    async def create(self, resource: str, doc: Mapping[str, Any]) -> dict[str, Any]:
        """Insert one document in its own transaction.

        Args:
            resource: Table or model class name.
            doc: Column-keyed (or attribute-keyed) document.

        Returns:
            dict: The stored row, column-keyed, including server defaults.
        """
        model = self.model_for(resource)
        attributes = _column_to_attribute(model)
        values = {attributes.get(key, key): value for key, value in doc.items()}

        async with self.database.get_session() as session:
            instance = model(**values)
            session.add(instance)
            await session.flush()
            await session.refresh(instance)
            return instance_to_document(instance)

    async def count(self, resource: str) -> int:
        """Number of rows stored for a resource."""
        model = self.model_for(resource)
        async with self.database.get_session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return int(result.scalar_one())

    async def fetch_all(self, resource: str) -> Sequence[dict[str, Any]]:
        """Every stored row of a resource as column-keyed documents."""
        model = self.model_for(resource)
        async with self.database.get_session() as session:
            result = await session.execute(select(model))
            return [instance_to_document(row) for row in result.scalars().all()]
