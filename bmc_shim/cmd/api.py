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

"""The BMC shim Redfish API service."""

import sys

from oslo_log import log

from bmc_shim.common import driver_factory
from bmc_shim.common import service as shim_service
from bmc_shim.common import wsgi_service
from bmc_shim.conf import CONF

LOG = log.getLogger(__name__)


def main():
    # Parse config file and command line options, then start logging
    shim_service.prepare_service(sys.argv)

    if not (CONF.auth.username or CONF.auth.password):
        LOG.warning('No credentials configured in [auth], the Redfish API '
                    'is served without authentication.')

    # Configuration errors abort the startup here
    registry = driver_factory.build_registry()

    # Build and start the WSGI app
    server = wsgi_service.WSGIService('bmc_shim_api', registry=registry)
    launcher = shim_service.launch(server)
    launcher.wait()


if __name__ == '__main__':
    sys.exit(main())
