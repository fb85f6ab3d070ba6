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

"""Unit tests for the in-memory repository client."""

import unittest

from sr_idgen.errors import NotFoundError
from sr_idgen.integrations.memory import InMemoryRepositoryClient
from sr_idgen.models import ManagedObject


class TestInMemoryRepositoryClient(unittest.TestCase):

    def setUp(self):
        self.obj = ManagedObject(bsr_uri="u1", properties={"a": "1"})
        self.client = InMemoryRepositoryClient([self.obj])

    def test_retrieve_returns_independent_copy(self):
        result = self.client.retrieve("u1")
        self.assertTrue(result.ok)
        result.value.properties["a"] = "changed"
        self.assertEqual(self.client.get("u1").properties["a"], "1")
        self.assertEqual(self.obj.properties["a"], "1")

    def test_update_replaces_stored_object(self):
        copy = self.client.retrieve("u1").value
        copy.properties["b"] = "2"
        self.assertTrue(self.client.update(copy).ok)
        self.assertEqual(self.client.get("u1").properties, {"a": "1", "b": "2"})
        self.assertEqual(self.client.calls, [("retrieve", "u1", 1), ("update", "u1")])

    def test_missing_objects(self):
        retrieved = self.client.retrieve("nope", depth=1)
        self.assertIsInstance(retrieved.error, NotFoundError)
        updated = self.client.update(ManagedObject(bsr_uri="nope"))
        self.assertIsInstance(updated.error, NotFoundError)
        self.assertIsNone(self.client.get("nope"))
