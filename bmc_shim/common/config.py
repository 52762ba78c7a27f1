# Copyright 2010 United States Government as represented by the
# Administrator of the National Aeronautics and Space Administration.
# All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import os

from oslo_config import cfg

from bmc_shim import version

CONFIG_FILE_ENV = 'BMC_SHIM_CONFIG_FILE'
CONFIG_DIR_ENV = 'BMC_SHIM_CONFIG_DIR'


def _env_locations(default_config_files):
    """Config file and directory named by the environment, if any.

    An explicit list of default files wins over the environment.
    """
    files = default_config_files
    if not files and os.environ.get(CONFIG_FILE_ENV):
        files = [os.environ[CONFIG_FILE_ENV]]
    dirs = None
    if os.environ.get(CONFIG_DIR_ENV):
        dirs = [os.environ[CONFIG_DIR_ENV]]
    return files, dirs


def parse_args(argv, default_config_files=None):
    files, dirs = _env_locations(default_config_files)
    cfg.CONF(argv[1:],
             project='bmc-shim',
             version=version.version_info.release_string(),
             default_config_files=files,
             default_config_dirs=dirs)
