# -*- encoding: utf-8 -*-
#
# Copyright © 2012 eNovance <licensing@enovance.com>
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

from oslo_log import log
from oslo_service import service

from bmc_shim.common import config
from bmc_shim.conf import CONF
from bmc_shim.conf import opts


LOG = log.getLogger(__name__)


def prepare_service(argv=None):
    """Prepare the BMC shim for execution.

    Sets up configuration and logging.
    """
    argv = [] if argv is None else argv
    log.register_options(CONF)
    opts.update_opt_defaults()
    config.parse_args(argv)
    # NOTE: logging has to be set up after argv was parsed, otherwise
    # it does not properly parse the options from config file and uses
    # defaults from oslo_log
    log.setup(CONF, 'bmc_shim')


def launch(server):
    # NOTE: the power state cache lives in process memory, so exactly one
    # process may serve the API.
    return service.launch(CONF, server, workers=1, restart_method='mutate')
