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

"""Classification of repository objects by their primary type URI."""

import enum
from typing import Optional

# Model URI bases.
GEP_BASE = 'http://www.ibm.com/xmlns/prod/serviceregistry/profile/v6r3/GovernanceEnablementModel#'
XGEP_BASE = 'http://www.ibm.com/xmlns/prod/serviceregistry/profile/v6r3/GovernanceProfileExtensions#'

SERVICE_VERSION = GEP_BASE + 'ServiceVersion'
APPLICATION_VERSION = GEP_BASE + 'ApplicationVersion'
GEP_SLA = GEP_BASE + 'ServiceLevelAgreement'
XGEP_SLA = XGEP_BASE + 'ServiceLevelAgreement'

# Model properties.
PROP_CONSUMER = 'gep63_consumerIdentifier'
PROP_CONTEXT = 'gep63_contextIdentifier'

VERSION_TYPES = frozenset({SERVICE_VERSION, APPLICATION_VERSION})
SLA_TYPES = frozenset({GEP_SLA, XGEP_SLA})


class ModelCategory(str, enum.Enum):
  """Business model categories that receive a generated identifier."""

  VERSION = 'version'
  SLA = 'sla'


def classify(primary_type: Optional[str]) -> Optional[ModelCategory]:
  """Maps a primary type URI to its model category.

  Matching is exact string equality against the known type URIs.

  Args:
    primary_type: The object's primary type URI, possibly None.

  Returns:
    The matching category, or None if the type is unset or unrecognized.
  """
  if primary_type is None:
    return None
  if primary_type in VERSION_TYPES:
    return ModelCategory.VERSION
  if primary_type in SLA_TYPES:
    return ModelCategory.SLA
  return None


def target_property(category: ModelCategory) -> str:
  """Returns the identifier property populated for category."""
  if category is ModelCategory.VERSION:
    return PROP_CONSUMER
  if category is ModelCategory.SLA:
    return PROP_CONTEXT
  raise ValueError(f'Unknown model category: {category!r}')
