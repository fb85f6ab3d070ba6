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

"""Temporal integration for the identifier modifier.

Repository lifecycle events delivered through a Temporal workflow are handled
by activities, since the modifier performs repository I/O and generates random
identifiers, neither of which may run inside workflow code.
"""

import dataclasses
import logging
from datetime import timedelta
from typing import Any, Callable, List, Optional

from temporalio import activity, workflow
from temporalio.contrib.pydantic import PydanticPayloadConverter, pydantic_data_converter
from temporalio.converter import DataConverter, DefaultPayloadConverter
from temporalio.plugin import SimplePlugin
from temporalio.worker import WorkflowRunner
from temporalio.worker.workflow_sandbox import SandboxedWorkflowRunner

from sr_idgen.modifier import ServiceRegistryModifier
from sr_idgen.models import CreationEvent, ManagedObject, ModifierStatus

logger = logging.getLogger(__name__)

ON_CREATE_ACTIVITY = "sr_idgen_on_create"
ON_UPDATE_ACTIVITY = "sr_idgen_on_update"
ON_DELETE_ACTIVITY = "sr_idgen_on_delete"

DEFAULT_START_TO_CLOSE = timedelta(seconds=30)


class ModifierActivities:
    """Exposes a modifier's callbacks as Temporal activities.

    The activities are synchronous, so the worker needs an `activity_executor`.
    """

    def __init__(self, modifier: ServiceRegistryModifier):
        self._modifier = modifier

    @activity.defn(name=ON_CREATE_ACTIVITY)
    def on_create(self, event: CreationEvent) -> ModifierStatus:
        status = self._modifier.on_create(event)
        if not status.ok:
            logger.warning(
                "on_create for %s recorded %d failure(s)",
                event.uri,
                len(status.failures),
            )
        return status

    @activity.defn(name=ON_UPDATE_ACTIVITY)
    def on_update(self, before: ManagedObject, after: ManagedObject) -> ModifierStatus:
        return self._modifier.on_update(before, after)

    @activity.defn(name=ON_DELETE_ACTIVITY)
    def on_delete(self, event: CreationEvent) -> ModifierStatus:
        return self._modifier.on_delete(event)

    def activities(self) -> List[Callable]:
        """Returns the bound activities for registering with a Worker."""
        return [self.on_create, self.on_update, self.on_delete]


async def execute_on_create(event: CreationEvent, **activity_options: Any) -> ModifierStatus:
    """Runs the on-create activity from workflow code.

    Args:
        event: The creation event to hand to the modifier.
        **activity_options: Options for workflow.execute_activity
            (e.g. task_queue, retry_policy). A 30 second
            start_to_close_timeout is used unless another timeout is given.
    """
    if not any(k.endswith("_timeout") for k in activity_options):
        activity_options["start_to_close_timeout"] = DEFAULT_START_TO_CLOSE
    return await workflow.execute_activity(
        ON_CREATE_ACTIVITY,
        event,
        result_type=ModifierStatus,
        **activity_options,
    )


def _data_converter(converter: Optional[DataConverter]) -> DataConverter:
    if converter is None:
        return pydantic_data_converter
    elif converter.payload_converter_class is DefaultPayloadConverter:
        return dataclasses.replace(
            converter, payload_converter_class=PydanticPayloadConverter
        )
    elif not isinstance(converter.payload_converter, PydanticPayloadConverter):
        raise ValueError(
            "The payload converter must be of type PydanticPayloadConverter."
        )
    return converter


def _workflow_runner(runner: Optional[WorkflowRunner]) -> WorkflowRunner:
    if not runner:
        raise ValueError("No WorkflowRunner provided to the IdGen plugin.")

    # Models are pydantic; let them through the sandbox unchanged.
    if isinstance(runner, SandboxedWorkflowRunner):
        return dataclasses.replace(
            runner,
            restrictions=runner.restrictions.with_passthrough_modules("sr_idgen", "pydantic"),
        )
    return runner


class IdGenPlugin(SimplePlugin):
    """Client/worker plugin configuring pydantic payloads for sr_idgen models."""

    def __init__(self):
        super().__init__(
            name="IdGenPlugin",
            data_converter=_data_converter,
            workflow_runner=_workflow_runner,
        )
