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

"""Acceptance test helpers for the Identity v3 API.

Every helper takes the running test case and a tempest client manager (for
example ``cls.os_admin``) already authenticated against keystone, and issues
exactly one request through the manager's identity v3 clients.

Two error policies apply:

* ``create_*``, ``find_*`` and ``assign_*`` let the client exception
  propagate, the caller decides whether it is fatal.
* ``delete_*`` and ``unassign_*`` are meant for cleanups, so any failure
  aborts the running test through ``test.fail()``.

"""

import copy

from oslo_log import log

from keystone_acceptance.common import tools
from keystone_acceptance import config
from keystone_acceptance import exception


CONF = config.CONF
LOG = log.getLogger(__name__)


def _random_name():
    return tools.random_string(CONF.identity_acceptance.name_prefix,
                               CONF.identity_acceptance.name_length)


def _create(kind, create_call, create_opts):
    name = _random_name()
    LOG.info('Attempting to create %(kind)s: %(name)s',
             {'kind': kind, 'name': name})

    # The caller's options are reused across tests, never mutate them.
    opts = copy.deepcopy(create_opts) if create_opts is not None else {}
    opts['name'] = name

    ref = create_call(**opts)[kind]

    LOG.info('Successfully created %(kind)s %(name)s with ID %(id)s',
             {'kind': kind, 'name': name, 'id': ref['id']})
    tools.print_resource(ref)
    return ref


def _delete(test, kind, delete_call, ref_id):
    try:
        delete_call(ref_id)
    except Exception as e:
        test.fail('Unable to delete %(kind)s %(id)s: %(error)s' %
                  {'kind': kind, 'id': ref_id, 'error': e})

    LOG.info('Deleted %(kind)s: %(id)s', {'kind': kind, 'id': ref_id})


def _find(kind, collection, list_call):
    LOG.info('Attempting to find a %s', kind)

    refs = list_call()[collection]
    # NOTE: "first" is whatever order the backend lists in, callers must not
    # rely on which record they get.
    if not refs:
        raise exception.ResourceNotFound(resource=kind)
    ref = refs[0]

    LOG.info('Successfully found a %(kind)s %(name)s with ID %(id)s',
             {'kind': kind, 'name': ref['name'], 'id': ref['id']})
    return ref


def create_project(test, client, create_opts=None):
    """Create a project with a random name.

    :param test: the running test case.
    :param client: a tempest client manager.
    :param create_opts: optional dict of project attributes: description,
                        domain_id, enabled, is_domain, parent_id and tags.
                        Any name given is replaced by the random one.
    :returns: the created project.
    :raises tempest.lib.exceptions.TempestException: if the project could
        not be created.
    """
    return _create('project', client.projects_client.create_project,
                   create_opts)


def create_user(test, client, create_opts=None):
    """Create a user with a random name.

    :param create_opts: optional dict of user attributes: default_project_id,
                        description, domain_id, email, enabled and password.
    :returns: the created user.
    """
    return _create('user', client.users_v3_client.create_user, create_opts)


def create_group(test, client, create_opts=None):
    """Create a group with a random name.

    :param create_opts: optional dict of group attributes: description and
                        domain_id.
    :returns: the created group.
    """
    return _create('group', client.groups_client.create_group, create_opts)


def create_domain(test, client, create_opts=None):
    """Create a domain with a random name.

    :param create_opts: optional dict of domain attributes: description and
                        enabled. A domain can only be deleted once disabled,
                        so tests usually pass ``{'enabled': False}``.
    :returns: the created domain.
    """
    return _create('domain', client.domains_client.create_domain,
                   create_opts)


def create_role(test, client, create_opts=None):
    """Create a role with a random name.

    :param create_opts: optional dict of role attributes: description and
                        domain_id.
    :returns: the created role.
    """
    return _create('role', client.roles_v3_client.create_role, create_opts)


def delete_project(test, client, project_id):
    """Delete a project, failing the test if it cannot be deleted.

    Works best as a cleanup::

        self.addCleanup(identity.delete_project, self, client, project['id'])

    """
    _delete(test, 'project', client.projects_client.delete_project,
            project_id)


def delete_user(test, client, user_id):
    """Delete a user, failing the test if it cannot be deleted."""
    _delete(test, 'user', client.users_v3_client.delete_user, user_id)


def delete_group(test, client, group_id):
    """Delete a group, failing the test if it cannot be deleted."""
    _delete(test, 'group', client.groups_client.delete_group, group_id)


def delete_domain(test, client, domain_id):
    """Delete a domain, failing the test if it cannot be deleted.

    Keystone refuses to delete an enabled domain.
    """
    _delete(test, 'domain', client.domains_client.delete_domain, domain_id)


def delete_role(test, client, role_id):
    """Delete a role, failing the test if it cannot be deleted."""
    _delete(test, 'role', client.roles_v3_client.delete_role, role_id)


def find_project(test, client):
    """Return the first project visible to the client.

    Only the first page of the collection is read.

    :raises keystone_acceptance.exception.ResourceNotFound: if the client
        sees no project at all.
    """
    return _find('project', 'projects', client.projects_client.list_projects)


def find_user(test, client):
    """Return the first user visible to the client."""
    return _find('user', 'users', client.users_v3_client.list_users)


def find_group(test, client):
    """Return the first group visible to the client."""
    return _find('group', 'groups', client.groups_client.list_groups)


def find_domain(test, client):
    """Return the first domain visible to the client."""
    return _find('domain', 'domains', client.domains_client.list_domains)


def find_role(test, client):
    """Return the first role visible to the client."""
    return _find('role', 'roles', client.roles_v3_client.list_roles)


def assign_role_to_user_on_project(test, client, role, user, project):
    """Grant a role to a user on a project.

    :raises tempest.lib.exceptions.TempestException: if the grant failed.
    """
    LOG.info('Attempting to grant user %(user)s role %(role)s on project '
             '%(project)s', {'user': user['name'], 'role': role['name'],
                             'project': project['name']})

    client.roles_v3_client.create_user_role_on_project(
        project['id'], user['id'], role['id'])

    LOG.info('Granted user %(user)s role %(role)s on project %(project)s',
             {'user': user['name'], 'role': role['name'],
              'project': project['name']})


def unassign_role_from_user_on_project(test, client, role, user, project):
    """Revoke a role of a user on a project, failing the test on error."""
    LOG.info('Attempting to remove role %(role)s from user %(user)s on '
             'project %(project)s', {'role': role['name'],
                                     'user': user['name'],
                                     'project': project['name']})

    try:
        client.roles_v3_client.delete_role_from_user_on_project(
            project['id'], user['id'], role['id'])
    except Exception:
        test.fail('Unable to remove role')

    LOG.info('Removed role %(role)s from user %(user)s on project '
             '%(project)s', {'role': role['name'], 'user': user['name'],
                             'project': project['name']})


def assign_role_to_user_on_domain(test, client, role, user, domain):
    """Grant a role to a user on a domain."""
    LOG.info('Attempting to grant user %(user)s role %(role)s on domain '
             '%(domain)s', {'user': user['name'], 'role': role['name'],
                            'domain': domain['name']})

    client.roles_v3_client.create_user_role_on_domain(
        domain['id'], user['id'], role['id'])

    LOG.info('Granted user %(user)s role %(role)s on domain %(domain)s',
             {'user': user['name'], 'role': role['name'],
              'domain': domain['name']})


def unassign_role_from_user_on_domain(test, client, role, user, domain):
    """Revoke a role of a user on a domain, failing the test on error."""
    LOG.info('Attempting to remove role %(role)s from user %(user)s on '
             'domain %(domain)s', {'role': role['name'],
                                   'user': user['name'],
                                   'domain': domain['name']})

    try:
        client.roles_v3_client.delete_role_from_user_on_domain(
            domain['id'], user['id'], role['id'])
    except Exception:
        test.fail('Unable to remove role')

    LOG.info('Removed role %(role)s from user %(user)s on domain '
             '%(domain)s', {'role': role['name'], 'user': user['name'],
                            'domain': domain['name']})


def assign_role_to_group_on_project(test, client, role, group, project):
    """Grant a role to a group on a project."""
    LOG.info('Attempting to grant group %(group)s role %(role)s on project '
             '%(project)s', {'group': group['name'], 'role': role['name'],
                             'project': project['name']})

    client.roles_v3_client.create_group_role_on_project(
        project['id'], group['id'], role['id'])

    LOG.info('Granted group %(group)s role %(role)s on project %(project)s',
             {'group': group['name'], 'role': role['name'],
              'project': project['name']})


def unassign_role_from_group_on_project(test, client, role, group, project):
    """Revoke a role of a group on a project, failing the test on error."""
    LOG.info('Attempting to remove role %(role)s from group %(group)s on '
             'project %(project)s', {'role': role['name'],
                                     'group': group['name'],
                                     'project': project['name']})

    try:
        client.roles_v3_client.delete_role_from_group_on_project(
            project['id'], group['id'], role['id'])
    except Exception:
        test.fail('Unable to remove role')

    LOG.info('Removed role %(role)s from group %(group)s on project '
             '%(project)s', {'role': role['name'], 'group': group['name'],
                             'project': project['name']})
