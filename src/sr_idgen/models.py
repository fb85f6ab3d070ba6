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

"""Pydantic models exchanged between the host repository and the modifier."""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field


class ManagedObject(BaseModel):
  """A repository object as seen by the modifier.

  The host owns the object. The modifier only reads the reference it is handed
  and writes to copies it retrieves itself.
  """

  bsr_uri: str
  """The repository URI identifying the object."""

  primary_type: Optional[str] = None
  """The declared business model type URI."""

  properties: dict[str, Optional[str]] = Field(default_factory=dict)
  """User-defined properties keyed by name."""

  is_generic: bool = True
  """Whether the object is a structured business object rather than a document."""


class CreationEvent(BaseModel):
  """Notification that the host created obj."""

  obj: ManagedObject

  @property
  def uri(self) -> str:
    return self.obj.bsr_uri


class StatusCode(str, enum.Enum):
  OK = 'ok'
  ERROR = 'error'


class FailureKind(str, enum.Enum):
  """The step of the creation procedure that failed."""

  ID_GENERATION = 'id_generation'
  RETRIEVAL = 'retrieval'
  PROPERTY_WRITE = 'property_write'
  PERSIST = 'persist'


class Failure(BaseModel):
  """A collaborator error recorded during a callback."""

  kind: FailureKind
  message: str
  error_type: str
  property_name: Optional[str] = None

  @classmethod
  def from_exception(
      cls,
      kind: FailureKind,
      error: BaseException,
      property_name: Optional[str] = None,
  ) -> Failure:
    return cls(
        kind=kind,
        message=str(error),
        error_type=type(error).__name__,
        property_name=property_name,
    )


class ModifierStatus(BaseModel):
  """Aggregate result returned to the host from a modifier callback."""

  return_code: StatusCode = StatusCode.OK
  failures: list[Failure] = Field(default_factory=list)

  @property
  def ok(self) -> bool:
    return self.return_code is StatusCode.OK

  def add_failure(self, failure: Failure) -> None:
    """Records failure and marks the status as an error."""
    self.failures.append(failure)
    self.return_code = StatusCode.ERROR
