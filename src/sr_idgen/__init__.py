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

"""Identifier generation modifier for service registry repositories."""

from .config import IdGenSettings
from .errors import RepositoryError
from .models import CreationEvent
from .models import Failure
from .models import FailureKind
from .models import ManagedObject
from .models import ModifierStatus
from .models import StatusCode
from .modifier import IdentifierModifier
from .modifier import ServiceRegistryModifier
from .repository import RepositoryClient
from .types import ModelCategory
from .types import classify

__version__ = '0.1.0'

__all__ = [
    'CreationEvent',
    'Failure',
    'FailureKind',
    'IdGenSettings',
    'IdentifierModifier',
    'ManagedObject',
    'ModelCategory',
    'ModifierStatus',
    'RepositoryClient',
    'RepositoryError',
    'ServiceRegistryModifier',
    'StatusCode',
    'classify',
]
