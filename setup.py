# Copyright (c) 2013 Mirantis Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

import setuptools

project = 'gce-compute'


def parse_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


setuptools.setup(
    name=project,
    version='0.1.0',
    description='Client binding and node provisioning for the Google '
                'Compute Engine API',
    author='OpenStack',
    author_email='openstack-dev@lists.openstack.org',
    classifiers=[
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    license='Apache Software License',
    packages=setuptools.find_packages(exclude=['bin']),
    install_requires=parse_requirements('requirements.txt'),
    extras_require={
        'test': parse_requirements('test-requirements.txt'),
    },
    python_requires='>=3.6',
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'gce-nodes = gcecompute.cli.gce_nodes:main',
        ],
        'oslo.config.opts': [
            'gcecompute.config = gcecompute.config:list_opts',
        ],
    },
)
