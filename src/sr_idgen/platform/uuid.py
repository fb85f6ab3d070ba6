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


"""Platform module for abstracting unique identifier generation."""

import uuid
from typing import Callable, Optional


def _default_id_provider() -> str:
  return str(uuid.uuid4())


def new_uuid(provider: Optional[Callable[[], str]] = None) -> str:
  """Returns a new unique identifier.

  Args:
    provider: A callable that returns a unique identifier string. Defaults to
      a random UUID4. Hosts that must replay deterministically pass their own.

  Raises:
    ValueError: If the provider returned an empty identifier.
  """
  value = (provider or _default_id_provider)()
  if not value:
    raise ValueError('ID provider returned an empty identifier.')
  return value


def is_canonical_uuid(value: str) -> bool:
  """Returns True if ``value`` is a UUID in canonical 8-4-4-4-12 text form."""
  try:
    return str(uuid.UUID(value)) == value
  except (TypeError, ValueError):
    return False
