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

"""In-memory repository client for local runs and tests."""

import logging
from typing import Dict, List, Optional

from sr_idgen.errors import NotFoundError
from sr_idgen.models import ManagedObject
from sr_idgen.repository import RepositoryClient

logger = logging.getLogger(__name__)


class InMemoryRepositoryClient(RepositoryClient):
    """A repository client that keeps objects in a dict keyed by URI.

    Retrieval returns deep copies so callers never share state with the store.
    Every call is recorded in `calls` for inspection.
    """

    def __init__(self, objects: Optional[List[ManagedObject]] = None):
        self._objects: Dict[str, ManagedObject] = {}
        self.calls: List[tuple] = []
        for obj in objects or []:
            self.put(obj)

    def put(self, obj: ManagedObject) -> None:
        """Stores a copy of `obj` without recording a call."""
        self._objects[obj.bsr_uri] = obj.model_copy(deep=True)

    def get(self, uri: str) -> Optional[ManagedObject]:
        """Returns the stored object for `uri`, or None."""
        return self._objects.get(uri)

    def _retrieve(self, uri: str, depth: int) -> ManagedObject:
        self.calls.append(("retrieve", uri, depth))
        stored = self._objects.get(uri)
        if stored is None:
            raise NotFoundError(f"No object with URI {uri}.")
        return stored.model_copy(deep=True)

    def _update(self, obj: ManagedObject) -> None:
        self.calls.append(("update", obj.bsr_uri))
        if obj.bsr_uri not in self._objects:
            raise NotFoundError(f"No object with URI {obj.bsr_uri}.")
        logger.debug("Updating %s", obj.bsr_uri)
        self._objects[obj.bsr_uri] = obj.model_copy(deep=True)
