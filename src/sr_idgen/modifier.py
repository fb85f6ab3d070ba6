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

"""Repository modifier that assigns generated identifiers to new objects.

When the host creates a business model object, :class:`IdentifierModifier`
generates a UUID and stores it on the object: versions get a consumer
identifier, service level agreements get a context identifier.
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Optional

import structlog

from .config import IdGenSettings
from .config import get_settings
from .errors import RepositoryError
from .models import CreationEvent
from .models import Failure
from .models import FailureKind
from .models import ManagedObject
from .models import ModifierStatus
from .platform import uuid as platform_uuid
from .properties import apply_identifier
from .repository import DictPropertyHelper
from .repository import PropertyHelper
from .repository import RepositoryClient
from .types import classify
from .types import target_property


class ServiceRegistryModifier(abc.ABC):
  """Callback interface the host invokes for object lifecycle events."""

  @abc.abstractmethod
  def on_create(self, event: CreationEvent) -> ModifierStatus:
    ...

  @abc.abstractmethod
  def on_update(
      self, before: ManagedObject, after: ManagedObject
  ) -> ModifierStatus:
    ...

  @abc.abstractmethod
  def on_delete(self, event: CreationEvent) -> ModifierStatus:
    ...


class IdentifierModifier(ServiceRegistryModifier):
  """Generates consumer and context identifiers for created objects.

  Args:
    client: The host repository client.
    property_helper: Property access for retrieved objects. Defaults to
      :class:`DictPropertyHelper`.
    settings: Modifier settings. Defaults to the environment settings.
    logger: A structlog logger. Defaults to a logger for this module.
    id_provider: Identifier source for this instance. Defaults to a random
      UUID4. An empty identifier is recorded as a failure.
  """

  def __init__(
      self,
      client: RepositoryClient,
      *,
      property_helper: Optional[PropertyHelper] = None,
      settings: Optional[IdGenSettings] = None,
      logger: Optional[Any] = None,
      id_provider: Optional[Callable[[], str]] = None,
  ):
    self._client = client
    self._helper = property_helper or DictPropertyHelper()
    self._settings = settings or get_settings()
    self._id_provider = id_provider
    self._log = (logger or structlog.get_logger(__name__)).bind(
        component='identifier_modifier', modifier=type(self).__name__
    )

  def on_create(self, event: CreationEvent) -> ModifierStatus:
    """Assigns an identifier if the created object is a version or an SLA.

    Collaborator errors are recorded on the returned status; none are raised.
    """
    log = self._log.bind(method='on_create', uri=event.uri)
    log.debug('entering')
    status = ModifierStatus()

    ref = event.obj
    category = classify(ref.primary_type) if ref.is_generic else None
    if category is None:
      log.debug('exiting', return_code=status.return_code.value)
      return status

    prop = target_property(category)
    log = log.bind(category=category.value, property=prop)
    try:
      identifier = platform_uuid.new_uuid(self._id_provider)
    except ValueError as e:
      log.error('exception generating identifier', exc_info=e)
      status.add_failure(
          Failure.from_exception(FailureKind.ID_GENERATION, e, prop)
      )
      return status

    # Always re-retrieve before changing; the passed-in object may be shared.
    retrieved = self._client.retrieve(
        event.uri, depth=self._settings.retrieve_depth
    )
    if not retrieved.ok:
      log.error('exception retrieving object', exc_info=retrieved.error)
      status.add_failure(
          Failure.from_exception(FailureKind.RETRIEVAL, retrieved.error)
      )
      return status
    obj = retrieved.value

    try:
      mode = apply_identifier(self._helper, obj, prop, identifier)
    except RepositoryError as e:
      log.error('exception updating property', exc_info=e)
      status.add_failure(
          Failure.from_exception(FailureKind.PROPERTY_WRITE, e, prop)
      )
      if not self._settings.persist_on_write_failure:
        return status
    else:
      log.info('identifier assigned', mode=mode.value, identifier=identifier)

    updated = self._client.update(obj)
    if not updated.ok:
      log.error('exception saving object', exc_info=updated.error)
      status.add_failure(
          Failure.from_exception(FailureKind.PERSIST, updated.error)
      )

    log.debug('exiting', return_code=status.return_code.value)
    return status

  def on_update(
      self, before: ManagedObject, after: ManagedObject
  ) -> ModifierStatus:
    return ModifierStatus()

  def on_delete(self, event: CreationEvent) -> ModifierStatus:
    return ModifierStatus()
