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

"""Unit tests for the Temporal integration."""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from temporalio.contrib.pydantic import PydanticPayloadConverter, pydantic_data_converter
from temporalio.converter import DataConverter
from temporalio.plugin import SimplePlugin

from sr_idgen import types
from sr_idgen.config import IdGenSettings
from sr_idgen.integrations import temporal
from sr_idgen.integrations.memory import InMemoryRepositoryClient
from sr_idgen.models import CreationEvent, ManagedObject, ModifierStatus
from sr_idgen.modifier import IdentifierModifier


class TestModifierActivities(unittest.TestCase):

    def test_on_create_delegates_to_modifier(self):
        obj = ManagedObject(bsr_uri="u1", primary_type=types.APPLICATION_VERSION)
        client = InMemoryRepositoryClient([obj])
        modifier = IdentifierModifier(
            client, settings=IdGenSettings(), id_provider=lambda: "from-activity"
        )
        activities = temporal.ModifierActivities(modifier)

        status = activities.on_create(CreationEvent(obj=obj))

        self.assertTrue(status.ok)
        self.assertEqual(
            client.get("u1").properties[types.PROP_CONSUMER], "from-activity"
        )

    def test_error_status_is_returned(self):
        modifier = IdentifierModifier(InMemoryRepositoryClient(), settings=IdGenSettings())
        activities = temporal.ModifierActivities(modifier)
        obj = ManagedObject(bsr_uri="missing", primary_type=types.GEP_SLA)

        status = activities.on_create(CreationEvent(obj=obj))

        self.assertFalse(status.ok)

    def test_update_and_delete_delegate(self):
        modifier = MagicMock()
        modifier.on_update.return_value = ModifierStatus()
        modifier.on_delete.return_value = ModifierStatus()
        activities = temporal.ModifierActivities(modifier)
        obj = ManagedObject(bsr_uri="u1")

        self.assertTrue(activities.on_update(obj, obj).ok)
        self.assertTrue(activities.on_delete(CreationEvent(obj=obj)).ok)
        modifier.on_update.assert_called_once_with(obj, obj)

    def test_activities_list(self):
        activities = temporal.ModifierActivities(MagicMock())
        self.assertEqual(
            [a.__name__ for a in activities.activities()],
            ["on_create", "on_update", "on_delete"],
        )


class TestExecuteOnCreate(unittest.TestCase):

    def _run(self, **options):
        event = CreationEvent(obj=ManagedObject(bsr_uri="u1"))
        execute = AsyncMock(return_value=ModifierStatus())
        with patch.object(temporal.workflow, "execute_activity", execute):
            loop = asyncio.new_event_loop()
            try:
                result = loop.run_until_complete(temporal.execute_on_create(event, **options))
            finally:
                loop.close()
        return event, execute, result

    def test_default_timeout(self):
        event, execute, result = self._run(task_queue="q")
        self.assertTrue(result.ok)
        args, kwargs = execute.call_args
        self.assertEqual(args, (temporal.ON_CREATE_ACTIVITY, event))
        self.assertIs(kwargs["result_type"], ModifierStatus)
        self.assertEqual(kwargs["start_to_close_timeout"], temporal.DEFAULT_START_TO_CLOSE)
        self.assertEqual(kwargs["task_queue"], "q")

    def test_explicit_timeout_kept(self):
        _, execute, _ = self._run(schedule_to_close_timeout=50)
        _, kwargs = execute.call_args
        self.assertEqual(kwargs["schedule_to_close_timeout"], 50)
        self.assertNotIn("start_to_close_timeout", kwargs)


class TestDataConverter(unittest.TestCase):

    def test_none_uses_pydantic_converter(self):
        self.assertIs(temporal._data_converter(None), pydantic_data_converter)

    def test_default_converter_is_upgraded(self):
        converter = temporal._data_converter(DataConverter())
        self.assertIs(converter.payload_converter_class, PydanticPayloadConverter)

    def test_pydantic_converter_is_kept(self):
        self.assertIs(
            temporal._data_converter(pydantic_data_converter), pydantic_data_converter
        )

    def test_plugin(self):
        self.assertIsInstance(temporal.IdGenPlugin(), SimplePlugin)

    def test_workflow_runner_required(self):
        with self.assertRaises(ValueError):
            temporal._workflow_runner(None)
