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

import random
import string

from oslo_log import log
from oslo_serialization import jsonutils


LOG = log.getLogger(__name__)

ALPHANUMERIC = string.ascii_letters + string.digits


def random_string(prefix, length):
    """Return ``prefix`` followed by ``length`` random letters and digits."""
    suffix = ''.join(random.choice(ALPHANUMERIC) for _ in range(length))
    return prefix + suffix


def print_resource(resource):
    """Log a resource as indented JSON, handy when debugging a live run."""
    LOG.debug(jsonutils.dumps(resource, indent=2, sort_keys=True))
