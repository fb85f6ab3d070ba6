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

"""Writes a generated identifier onto a retrieved object."""

import enum

from .models import ManagedObject
from .repository import PropertyHelper


class AssignmentMode(str, enum.Enum):
  ADD = 'add'
  SET = 'set'


def apply_identifier(
    helper: PropertyHelper, obj: ManagedObject, name: str, value: str
) -> AssignmentMode:
  """Sets property ``name`` on ``obj`` to ``value``.

  An existing property is overwritten in place; a missing one is added.

  Raises:
    InvalidPropertyError: If the object's schema rejects the property.
  """
  # If property exists, set value, else add it.
  if helper.is_property_set(obj, name):
    helper.set_property_value(obj, name, value)
    return AssignmentMode.SET
  helper.add_property(obj, name, value)
  return AssignmentMode.ADD
