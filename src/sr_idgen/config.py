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

"""Settings for the identifier modifier, loaded from the environment."""

import functools

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class IdGenSettings(BaseSettings):
  """Modifier settings; each field can be set via ``SR_IDGEN_<NAME>``."""

  model_config = SettingsConfigDict(
      env_prefix='SR_IDGEN_',
      env_ignore_empty=True,
      case_sensitive=False,
  )

  retrieve_depth: int = Field(default=1, ge=0)
  """Depth used when re-retrieving a created object before updating it."""

  persist_on_write_failure: bool = True
  """Whether to still update the object after the property write failed.

  Existing deployments rely on the update being issued regardless, so this
  stays on unless explicitly disabled.
  """

  log_level: str = 'INFO'


@functools.lru_cache(maxsize=1)
def get_settings() -> IdGenSettings:
  """Returns the process-wide settings, read once from the environment."""
  return IdGenSettings()
