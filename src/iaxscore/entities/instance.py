"""
Instances - Domain Objects Iterated by Controllers

🎯 Entity-Centric Design:
An instance is a domain object with an identity. Controllers hand
collections of instances to the InstanceIterator plugin, which treats each
one as opaque and only passes it along to listeners.
"""

import uuid
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Instance(BaseModel):
    """
    Base class for domain instances.

    Example:
        class Article(Instance):
            title: str
            published: bool = False
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    def __hash__(self) -> int:
        return hash((self.__class__, self.id))


InstanceType = TypeVar("InstanceType", bound=Instance)


class InstanceCollection(Generic[InstanceType]):
    """
    Ordered, restartable collection of instances.

    Unlike a generator, a collection can be iterated any number of times,
    each pass yielding the instances in insertion order.
    """

    def __init__(self, instances: Optional[Iterable[InstanceType]] = None):
        self._instances: List[InstanceType] = []
        self._index: Dict[str, InstanceType] = {}
        if instances:
            self.extend(instances)

    def add(self, instance: InstanceType) -> "InstanceCollection[InstanceType]":
        """Add an instance, replacing any instance with the same id"""
        existing = self._index.get(instance.id)
        if existing is not None:
            self._instances[self._instances.index(existing)] = instance
        else:
            self._instances.append(instance)
        self._index[instance.id] = instance
        return self

    def extend(self, instances: Iterable[InstanceType]) -> "InstanceCollection[InstanceType]":
        for instance in instances:
            self.add(instance)
        return self

    def get(self, instance_id: str) -> Optional[InstanceType]:
        return self._index.get(instance_id)

    def ids(self) -> List[str]:
        return [instance.id for instance in self._instances]

    def to_list(self) -> List[Dict[str, Any]]:
        """Dump every instance to a plain dict"""
        return [instance.model_dump() for instance in self._instances]

    def __iter__(self) -> Iterator[InstanceType]:
        return iter(list(self._instances))

    def __len__(self) -> int:
        return len(self._instances)

    def __contains__(self, instance: object) -> bool:
        return isinstance(instance, Instance) and instance.id in self._index

    def __repr__(self) -> str:
        return f"InstanceCollection({len(self)} instances)"


__all__ = ["Instance", "InstanceCollection", "InstanceType"]
