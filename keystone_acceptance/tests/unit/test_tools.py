# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import string
from unittest import mock

from keystone_acceptance.common import tools
from keystone_acceptance.tests.unit import core


class RandomStringTestCase(core.BaseTestCase):

    def test_prefix_and_length(self):
        value = tools.random_string('ACPTTEST', 8)
        self.assertTrue(value.startswith('ACPTTEST'))
        self.assertEqual(16, len(value))

    def test_suffix_is_alphanumeric(self):
        suffix = tools.random_string('', 64)
        for c in suffix:
            self.assertIn(c, string.ascii_letters + string.digits)

    def test_zero_length_is_prefix(self):
        self.assertEqual('ACPTTEST', tools.random_string('ACPTTEST', 0))


class PrintResourceTestCase(core.BaseTestCase):

    def test_logs_sorted_json(self):
        with mock.patch.object(tools.LOG, 'debug') as debug:
            tools.print_resource({'name': 'a', 'id': '1'})

        debug.assert_called_once_with('{\n  "id": "1",\n  "name": "a"\n}')
