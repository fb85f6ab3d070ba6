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

"""Errors raised by repository collaborators."""


class RepositoryError(Exception):
  """Base class for failures reported by the host repository."""


class NotFoundError(RepositoryError):
  """The requested object does not exist."""


class AccessError(RepositoryError):
  """The caller is not permitted to read or write the object."""


class ConflictError(RepositoryError):
  """The object was modified concurrently and the update was rejected."""


class ValidationError(RepositoryError):
  """The repository rejected the object on update."""


class InvalidPropertyError(RepositoryError):
  """The object's schema rejects the property name or value."""

  def __init__(self, message: str, property_name: str | None = None):
    super().__init__(message)
    self.property_name = property_name
