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

"""Structured logging setup for hosts that embed the modifier."""

import logging
from typing import Optional

import structlog

from .config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
  """Configures structlog to drop events below ``level``.

  Args:
    level: A standard logging level name such as ``'DEBUG'`` or ``'INFO'``.
      Defaults to the 'log_level' setting.

  Raises:
    ValueError: If ``level`` is not a known level name.
  """
  level = level or get_settings().log_level
  numeric = logging.getLevelName(level.upper())
  if not isinstance(numeric, int):
    raise ValueError(f'Unknown log level: {level!r}')
  structlog.configure(
      processors=[
          structlog.contextvars.merge_contextvars,
          structlog.processors.add_log_level,
          structlog.processors.TimeStamper(fmt='iso'),
          structlog.processors.format_exc_info,
          structlog.processors.JSONRenderer(),
      ],
      wrapper_class=structlog.make_filtering_bound_logger(numeric),
      cache_logger_on_first_use=False,
  )
