# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy
# of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from oslo_log import log

import bmc_shim.conf


_opts = [
    ('DEFAULT', bmc_shim.conf.default.list_opts()),
    ('api', bmc_shim.conf.api.opts),
    ('auth', bmc_shim.conf.auth.opts),
    ('command', bmc_shim.conf.command.opts),
    ('homeassistant', bmc_shim.conf.homeassistant.opts),
    ('power', bmc_shim.conf.power.opts),
]


def list_opts():
    """Return a list of oslo.config options available in the BMC shim.

    The returned list includes all oslo.config options. Each element of
    the list is a tuple. The first element is the name of the group, the
    second element is the options.

    The function is discoverable via the 'bmc_shim' entry point under the
    'oslo.config.opts' namespace.

    :returns: a list of (group, options) tuples
    """
    return _opts


def update_opt_defaults():
    log.set_defaults(
        default_log_levels=[
            'urllib3.connectionpool=WARNING',
            'requests=WARNING',
            'stevedore=INFO',
            'oslo_concurrency.lockutils=WARNING',
            'cheroot=WARNING',
        ]
    )
