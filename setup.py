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

import setuptools


project = 'keystone-acceptance'

requires = [
    'oslo.config>=5.2.0',
    'oslo.i18n>=3.15.3',
    'oslo.log>=3.44.0',
    'oslo.serialization>=2.18.0',
    'tempest>=17.1.0',
]

test_requires = [
    'fixtures>=3.0.0',
    'stestr>=1.0.0',
    'testtools>=2.2.0',
]


setuptools.setup(
    name=project,
    version='0.1.0',
    description="Identity v3 acceptance test helpers for OpenStack",
    license='Apache License (2.0)',
    author='OpenStack',
    author_email='openstack-discuss@lists.openstack.org',
    url='https://www.openstack.org',
    packages=setuptools.find_packages(include=['keystone_acceptance',
                                               'keystone_acceptance.*']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=requires,
    extras_require={'test': test_requires},
    entry_points={
        'tempest.test_plugins': [
            'keystone_acceptance = '
            'keystone_acceptance.plugin:KeystoneAcceptancePlugin',
        ],
        'oslo.config.opts': [
            'keystone_acceptance = keystone_acceptance.config:list_opts',
        ],
    },
    classifiers=[
        'Environment :: OpenStack',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
