# Copyright 2016 OpenStack Foundation
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

from oslo_config import cfg

from bmc_shim.conf import api
from bmc_shim.conf import auth
from bmc_shim.conf import command
from bmc_shim.conf import default
from bmc_shim.conf import homeassistant
from bmc_shim.conf import power

CONF = cfg.CONF

api.register_opts(CONF)
auth.register_opts(CONF)
command.register_opts(CONF)
default.register_opts(CONF)
homeassistant.register_opts(CONF)
power.register_opts(CONF)
