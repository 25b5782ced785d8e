"""
Entity Store Module.

Holds the in-memory collections of persons and meetings for a session.

The store enforces two invariants on every mutation:
- uniqueness: no two entities of one kind are equal under domain equality;
- referential integrity: every person id referenced by a meeting exists.

Every mutating method validates completely before touching state, so a
failed call leaves the store exactly as it was.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from src.core.entities import Meeting, Person
from src.core.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    IllegalReferenceError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", Person, Meeting)
StoredEntity = Union[Person, Meeting]


@dataclass(frozen=True)
class StoreSnapshot:
    """
    Immutable copy of the store contents at one point in time.

    Entities are frozen, so sharing them between snapshots is safe.
    """

    persons: Tuple[Person, ...] = ()
    meetings: Tuple[Meeting, ...] = ()


class UniqueEntityList(Generic[T]):
    """
    Ordered list of entities of one kind with no domain-equal duplicates.

    Order is insertion order and is preserved by ``replace``.
    """

    def __init__(self, kind: Type[T], same: Callable[[T, T], bool]) -> None:
        """
        Args:
            kind: The entity class held by this list.
            same: Domain equality predicate for two entities of ``kind``.
        """
        self.kind = kind
        self._same = same
        self._items: List[T] = []

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def contains(self, entity: T) -> bool:
        return any(self._same(existing, entity) for existing in self._items)

    def find_by_id(self, identifier: int) -> Optional[T]:
        for item in self._items:
            if item.id == identifier:
                return item
        return None

    def index_of(self, identifier: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == identifier:
                return index
        raise EntityNotFoundError(
            f"No {self.kind.__name__.lower()} with id {identifier}"
        )

    def next_id(self) -> int:
        return max((item.id for item in self._items), default=0) + 1

    def check_can_add(self, entity: T) -> None:
        """
        Raises DuplicateEntityError if ``entity`` clashes with a stored one.
        """
        if entity.id is not None and self.find_by_id(entity.id) is not None:
            raise DuplicateEntityError(
                f"{self.kind.__name__} id {entity.id} is already in use"
            )
        if self.contains(entity):
            raise DuplicateEntityError(f"Duplicate {self.kind.__name__.lower()}")

    def check_can_replace(self, index: int, entity: T) -> None:
        for i, existing in enumerate(self._items):
            if i != index and self._same(existing, entity):
                raise DuplicateEntityError(
                    f"Duplicate {self.kind.__name__.lower()}"
                )

    def append(self, entity: T) -> None:
        self._items.append(entity)

    def set(self, index: int, entity: T) -> None:
        self._items[index] = entity

    def pop(self, index: int) -> T:
        return self._items.pop(index)

    def as_tuple(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def reset(self, items: Iterable[T]) -> None:
        self._items = list(items)


class EntityStore:
    """
    In-memory store of persons and meetings.

    Identifiers are assigned per kind as ``max(existing) + 1``. Because
    they derive from the contents alone, restoring a snapshot also
    restores the identifiers the next insertion will use.
    """

    def __init__(self) -> None:
        """Initializes an empty store."""
        self._persons: UniqueEntityList[Person] = UniqueEntityList(
            Person, Person.is_same_person
        )
        self._meetings: UniqueEntityList[Meeting] = UniqueEntityList(
            Meeting, Meeting.is_same_meeting
        )

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------

    @property
    def persons(self) -> Tuple[Person, ...]:
        """Persons in insertion order."""
        return self._persons.as_tuple()

    @property
    def meetings(self) -> Tuple[Meeting, ...]:
        """Meetings in insertion order."""
        return self._meetings.as_tuple()

    def __len__(self) -> int:
        return len(self._persons) + len(self._meetings)

    def contains(self, entity: StoredEntity) -> bool:
        """
        Checks whether a domain-equal entity is stored.

        Args:
            entity: A Person or Meeting.

        Returns:
            bool: True if an equal entity of the same kind exists.
        """
        return self._list_for(type(entity)).contains(entity)

    def find_by_id(
        self, kind: Type[StoredEntity], identifier: int
    ) -> Optional[StoredEntity]:
        """
        Looks up an entity by kind and identifier.

        Args:
            kind: Person or Meeting.
            identifier: The entity id.

        Returns:
            The entity, or None if no entity of that kind has the id.
        """
        return self._list_for(kind).find_by_id(identifier)

    # --------------------------------------------------------------------------
    # Mutations
    # --------------------------------------------------------------------------

    def add(self, entity: StoredEntity) -> StoredEntity:
        """
        Inserts an entity at the end of its collection.

        Args:
            entity: A Person or Meeting. If its id is None one is assigned.

        Returns:
            The stored entity, carrying its identifier.

        Raises:
            DuplicateEntityError: If an equal entity (or the same id) exists.
            IllegalReferenceError: If a meeting references an unknown person.
        """
        target = self._list_for(type(entity))
        target.check_can_add(entity)
        self._check_references(entity)

        if entity.id is None:
            entity = dataclasses.replace(entity, id=target.next_id())
        target.append(entity)
        logger.debug(f"Added {type(entity).__name__} {entity.id}")
        return entity

    def remove(self, kind: Type[StoredEntity], identifier: int) -> StoredEntity:
        """
        Removes an entity by kind and identifier.

        Raises:
            EntityNotFoundError: If no such entity exists.
            IllegalReferenceError: If a person is still referenced by a meeting.
        """
        target = self._list_for(kind)
        index = target.index_of(identifier)

        if kind is Person:
            referencing = [m.id for m in self._meetings if identifier in m.person_ids]
            if referencing:
                raise IllegalReferenceError(
                    f"Person {identifier} is referenced by meetings {referencing}"
                )

        removed = target.pop(index)
        logger.debug(f"Removed {kind.__name__} {identifier}")
        return removed

    def replace(self, identifier: int, new_entity: StoredEntity) -> StoredEntity:
        """
        Replaces an entity in place, keeping its position and identifier.

        Args:
            identifier: Id of the entity to replace.
            new_entity: The replacement; its kind selects the collection.

        Returns:
            The stored replacement.

        Raises:
            EntityNotFoundError: If no entity with ``identifier`` exists.
            DuplicateEntityError: If the replacement equals another entity.
            IllegalReferenceError: If the replacement references unknown persons.
        """
        target = self._list_for(type(new_entity))
        index = target.index_of(identifier)
        new_entity = dataclasses.replace(new_entity, id=identifier)
        target.check_can_replace(index, new_entity)
        self._check_references(new_entity)

        target.set(index, new_entity)
        logger.debug(f"Replaced {type(new_entity).__name__} {identifier}")
        return new_entity

    # --------------------------------------------------------------------------
    # Snapshots
    # --------------------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        """Returns an immutable copy of the current contents."""
        return StoreSnapshot(
            persons=self._persons.as_tuple(), meetings=self._meetings.as_tuple()
        )

    def restore(self, snapshot: StoreSnapshot) -> None:
        """
        Replaces the whole contents with those of ``snapshot``.

        Args:
            snapshot: A snapshot previously produced by ``snapshot()``.
        """
        self._persons.reset(snapshot.persons)
        self._meetings.reset(snapshot.meetings)

    # --------------------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------------------

    def _list_for(self, kind: type) -> UniqueEntityList:
        if kind is Person:
            return self._persons
        if kind is Meeting:
            return self._meetings
        raise TypeError(f"Unsupported entity type: {kind!r}")

    def _check_references(self, entity: StoredEntity) -> None:
        if not isinstance(entity, Meeting):
            return
        missing = [p for p in entity.person_ids if self._persons.find_by_id(p) is None]
        if missing:
            raise IllegalReferenceError(f"Unknown person ids: {missing}")
