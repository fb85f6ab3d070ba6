# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Contracts for the host repository collaborators.

The host supplies a :class:`RepositoryClient` for retrieving and persisting
objects and a :class:`PropertyHelper` for reading and writing their
properties. Clients report failures as :class:`Result` values rather than
raising, so the modifier can fold them into its aggregate status.
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Generic, Iterable, Optional, Protocol, TypeVar, runtime_checkable

from .errors import InvalidPropertyError
from .errors import NotFoundError
from .errors import RepositoryError
from .models import ManagedObject

T = TypeVar('T')

DEFAULT_RETRIEVE_DEPTH = 1


@dataclasses.dataclass(frozen=True)
class Result(Generic[T]):
  """Outcome of a repository call: either a value or the error raised."""

  value: Optional[T] = None
  error: Optional[RepositoryError] = None

  @property
  def ok(self) -> bool:
    return self.error is None


class RepositoryClient(abc.ABC):
  """Retrieve and update access to the host repository.

  Subclasses implement :meth:`_retrieve` and :meth:`_update` and raise
  :class:`RepositoryError` subclasses on failure. Each public call is issued
  exactly once; retries, if any, belong to the implementation.
  """

  def retrieve(
      self, uri: str, depth: int = DEFAULT_RETRIEVE_DEPTH
  ) -> Result[ManagedObject]:
    """Fetches a fresh copy of the object at ``uri``.

    Args:
      uri: The repository URI of the object.
      depth: How many levels of related objects to include. Depth 1 returns
        the object with its direct properties only.

    Returns:
      A result holding a copy that is safe to mutate, or the error.
    """
    try:
      obj = self._retrieve(uri, depth)
    except RepositoryError as e:
      return Result(error=e)
    if obj is None:
      return Result(error=NotFoundError(f'No object with URI {uri}.'))
    return Result(value=obj)

  def update(self, obj: ManagedObject) -> Result[None]:
    """Persists ``obj``, replacing the stored object with the same URI."""
    try:
      self._update(obj)
    except RepositoryError as e:
      return Result(error=e)
    return Result()

  @abc.abstractmethod
  def _retrieve(self, uri: str, depth: int) -> ManagedObject:
    ...

  @abc.abstractmethod
  def _update(self, obj: ManagedObject) -> None:
    ...


@runtime_checkable
class PropertyHelper(Protocol):
  """Reads and writes named properties on a retrieved object."""

  def is_property_set(self, obj: ManagedObject, name: str) -> bool:
    ...

  def set_property_value(
      self, obj: ManagedObject, name: str, value: str
  ) -> None:
    ...

  def add_property(self, obj: ManagedObject, name: str, value: str) -> None:
    ...


class DictPropertyHelper:
  """Property helper backed by :attr:`ManagedObject.properties`.

  Args:
    allowed_properties: If given, the property names the schema accepts.
      Writing any other name raises :class:`InvalidPropertyError`.
  """

  def __init__(self, allowed_properties: Optional[Iterable[str]] = None):
    self._allowed = (
        frozenset(allowed_properties)
        if allowed_properties is not None
        else None
    )

  def is_property_set(self, obj: ManagedObject, name: str) -> bool:
    return name in obj.properties

  def set_property_value(
      self, obj: ManagedObject, name: str, value: str
  ) -> None:
    self._check(name, value)
    if name not in obj.properties:
      raise InvalidPropertyError(
          f'Property {name!r} is not set on {obj.bsr_uri}.', name
      )
    obj.properties[name] = value

  def add_property(self, obj: ManagedObject, name: str, value: str) -> None:
    self._check(name, value)
    if name in obj.properties:
      raise InvalidPropertyError(
          f'Property {name!r} already exists on {obj.bsr_uri}.', name
      )
    obj.properties[name] = value

  def _check(self, name: str, value: str) -> None:
    if self._allowed is not None and name not in self._allowed:
      raise InvalidPropertyError(f'Property {name!r} is not allowed.', name)
    if not isinstance(value, str):
      raise InvalidPropertyError(
          f'Property {name!r} requires a string value, got'
          f' {type(value).__name__}.',
          name,
      )
