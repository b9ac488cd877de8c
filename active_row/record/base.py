"""Active record base class.

Declare a record as a dataclass deriving from ActiveRecord; every field
must have a default so that an empty instance can be built::

    @dataclass
    class Contact(ActiveRecord):
        id: int | None = primary_key()
        firstName: str | None = None
        lastName: str | None = None
        email: str | None = None

Then store, query by example, and remove rows through the instance::

    contact = Contact(firstName="Guillaume", lastName="Wallet")
    contact.save(provider)

    found = Contact(firstName="Guillaume").find(provider)

    Contact(email="wallet.guillaume@gmail.com").delete(provider)

The table is the class name and the columns are the field names, both
verbatim. A candidate with every column None matches every row, for
``find`` and ``delete`` alike.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog

from active_row.core.connection import ConnectionProvider
from active_row.core.engine import Engine
from active_row.core.exceptions import MappingError, MultipleRowsError
from active_row.mapping.descriptor import AttributeDescriptor
from active_row.mapping.hydrator import empty_instance, hydrator_for
from active_row.mapping.introspect import describe
from active_row.record import planner

logger = structlog.get_logger(__name__)

R = TypeVar("R")
A = TypeVar("A", bound="ActiveRecord")


def save_record(engine: Engine, record: Any) -> None:
    """Insert or update *record*; back-fill the stored key after insert."""
    descriptor = describe(type(record))
    key = descriptor.primary_key
    query = planner.plan_save(record)
    if key is None or planner.exists_in_storage(record):
        engine.execute(query)
        return

    result = engine.execute(query, table=descriptor.table, key_column=key.name)
    if result.generated_key is not None:
        setattr(record, key.name, result.generated_key)


def _load_relation(engine: Engine, relation: AttributeDescriptor, key_value: Any) -> list[Any]:
    if relation.relation_target is None or relation.foreign_key is None:
        raise MappingError(relation.name, "relation without target or foreign key")
    child = empty_instance(relation.relation_target)
    setattr(child, relation.foreign_key, key_value)
    return find_records(engine, child)


def find_records(engine: Engine, candidate: R) -> list[R]:
    """Query by example and hydrate every row, loading relations eagerly.

    Relations are loaded by recursive finds, one per parent row and
    relation. Cyclic relation declarations are not detected.
    """
    record_type = type(candidate)
    descriptor = describe(record_type)
    rows = engine.fetch_all(planner.plan_find(candidate))
    results: list[R] = hydrator_for(record_type).hydrate_many(rows)

    relations = descriptor.relations
    key = descriptor.primary_key
    if not relations or not results:
        return results
    if key is None:
        raise MappingError(descriptor.table, "relations require a primary key on the owning type")

    for instance in results:
        key_value = getattr(instance, key.name)
        for relation in relations:
            setattr(instance, relation.name, _load_relation(engine, relation, key_value))
    return results


def delete_records(engine: Engine, candidate: Any) -> int:
    """Delete every row matching *candidate*; returns the affected row count."""
    return engine.execute(planner.plan_delete(candidate)).rowcount


class ActiveRecord:
    """Mixin giving a record dataclass its own persistence operations.

    Each operation borrows one connection from *provider* for its own
    duration and returns it before completing.
    """

    def save(self, provider: ConnectionProvider) -> None:
        """Insert this record if its key is null, otherwise update it by key.

        Raises:
            BindingError: If an attribute value is not a bindable scalar.
            PersistenceError: If the statement fails.
            MappingError: If the record type is malformed.
        """
        save_record(Engine(provider), self)

    def find(self: A, provider: ConnectionProvider) -> list[A]:
        """Return every stored record matching this one's non-null attributes.

        Raises:
            PersistenceError: If the statement fails.
            MappingError: If a row cannot be hydrated.
        """
        return find_records(Engine(provider), self)

    def find_corresponding(self: A, provider: ConnectionProvider) -> list[A]:
        """Alias of :meth:`find`."""
        return self.find(provider)

    def find_one(self: A, provider: ConnectionProvider) -> A | None:
        """Return the single matching record, or None.

        Raises:
            MultipleRowsError: If more than one row matches.
        """
        results = self.find(provider)
        if len(results) > 1:
            raise MultipleRowsError(type(self).__name__, len(results))
        return results[0] if results else None

    def find_parent(
        self,
        provider: ConnectionProvider,
        parent_type: type[R],
        foreign_key: str,
    ) -> R | None:
        """Follow a many-to-one link: load the *parent_type* row whose key
        equals this record's *foreign_key* attribute.

        Returns None when the foreign key is null or no parent exists.
        """
        value = getattr(self, foreign_key)
        if value is None:
            return None
        parent_key = describe(parent_type).primary_key
        if parent_key is None:
            raise MappingError(parent_type.__name__, "parent type has no primary key")

        candidate = empty_instance(parent_type)
        setattr(candidate, parent_key.name, value)
        parents = find_records(Engine(provider), candidate)
        if len(parents) > 1:
            raise MultipleRowsError(parent_type.__name__, len(parents))
        return parents[0] if parents else None

    def delete(self, provider: ConnectionProvider) -> None:
        """Delete every stored row matching this record's non-null attributes.

        Raises:
            PersistenceError: If the statement fails.
        """
        count = delete_records(Engine(provider), self)
        logger.debug("records_deleted", table=type(self).__name__, rowcount=count)
