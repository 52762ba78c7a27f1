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

import pecan

from bmc_shim.api.controllers import redfish
from bmc_shim.api import method
from bmc_shim.common import exception
from bmc_shim.common import readiness


class RootController(object):

    redfish = redfish.RedfishController()

    @method.expose()
    def livez(self, *args, **kwargs):
        """Liveness probe, answered as long as the process serves requests."""
        if args and any(args):
            pecan.abort(404)
        return {'status': 'ok'}

    @method.expose()
    def readyz(self, *args, **kwargs):
        """Readiness probe.

        :raises: BackendsUnavailable when no backend is healthy.
        """
        if args and any(args):
            pecan.abort(404)
        if not readiness.is_ready(pecan.request.context,
                                  pecan.request.registry):
            raise exception.BackendsUnavailable()
        return {'status': 'ok'}
