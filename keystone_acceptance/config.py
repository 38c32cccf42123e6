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

from oslo_config import cfg


CONF = cfg.CONF


def fmt(docstr):
    """Format a docstring for use as documentation in sample config."""
    # Docstrings carry literal newlines that should not be rendered into the
    # sample configuration file.
    return docstr.replace('\n', ' ').strip()


identity_acceptance_group = cfg.OptGroup(
    name='identity_acceptance',
    title='Identity v3 Acceptance Helper Options')

IdentityAcceptanceGroup = [
    cfg.StrOpt('name_prefix',
               default='ACPTTEST',
               help=fmt("""
Prefix of the random names given to the projects, users, groups, domains and
roles created by the acceptance helpers. Use it to spot leftovers of aborted
runs.
""")),
    cfg.IntOpt('name_length',
               default=8,
               min=1,
               help=fmt("""
Number of random letters and digits appended to `name_prefix` when naming a
new resource.
""")),
]


def register_opts(conf):
    conf.register_group(identity_acceptance_group)
    conf.register_opts(IdentityAcceptanceGroup,
                       group=identity_acceptance_group)


def list_opts():
    return [(identity_acceptance_group, IdentityAcceptanceGroup)]


register_opts(CONF)
