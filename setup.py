#!/usr/bin/env python
# Copyright (c) 2013 Hewlett-Packard Development Company, L.P.
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

project = 'bmc-shim'


def _read_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


setuptools.setup(
    name=project,
    version='1.0.0',
    description='Redfish ComputerSystem facade for hosts without a BMC',
    classifiers=[
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        ],
    python_requires='>=3.9',
    packages=setuptools.find_packages(include=['bmc_shim', 'bmc_shim.*']),
    include_package_data=True,
    install_requires=_read_requirements('requirements.txt'),
    extras_require={
        'test': _read_requirements('test-requirements.txt'),
    },
    entry_points={
        'console_scripts': [
            'bmc-shim-api = bmc_shim.cmd.api:main',
        ],
        'bmc_shim.backends': [
            'noop = bmc_shim.drivers.noop:NoopBackend',
            'command = bmc_shim.drivers.command:CommandBackend',
            'homeassistant = '
            'bmc_shim.drivers.homeassistant:HomeAssistantBackend',
        ],
        'oslo.config.opts': [
            'bmc_shim = bmc_shim.conf.opts:list_opts',
        ],
    },
)
