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

import threading

from cheroot import wsgi
from oslo_log import log as logging
from oslo_service import service

from bmc_shim.api import app
from bmc_shim.common import utils
from bmc_shim.conf import CONF


LOG = logging.getLogger(__name__)


class WSGIService(service.ServiceBase):
    """Serves the Redfish API with a cheroot WSGI server."""

    def __init__(self, name, registry=None, conf=None):
        """Initialize, but do not start the WSGI server.

        :param name: The name of the WSGI server.
        :param registry: SystemRegistry to serve; built from the
            configuration when not given.
        :param conf: Object to load the listening options from, [api] by
            default.
        :returns: None
        """
        self.name = name
        self.app = app.WSGIApplication(registry=registry)
        conf = CONF.api if conf is None else conf

        bind_addr = (conf.host_ip, conf.port)
        if conf.unix_socket:
            utils.unlink_without_raise(conf.unix_socket)
            bind_addr = conf.unix_socket

        self.server = wsgi.Server(
            bind_addr=bind_addr,
            wsgi_app=self.app,
            server_name=name)

        self._unix_socket = conf.unix_socket
        self._bind_addr = bind_addr
        self._thread = None

    def start(self):
        """Start serving this service using loaded configuration.

        :returns: None
        """
        self.server.prepare()
        LOG.info('%(name)s listening on %(addr)s',
                 {'name': self.name, 'addr': self._bind_addr})

        self._thread = threading.Thread(
            target=self.server.serve,
            daemon=True
        )

        self._thread.start()

    def stop(self):
        """Stop serving this API.

        :returns: None
        """
        if self.server:
            self.server.stop()
            if self._thread:
                self._thread.join(timeout=2)

        if self._unix_socket:
            utils.unlink_without_raise(self._unix_socket)

    def wait(self):
        """Wait for the service to stop serving this API.

        :returns: None
        """
        if self._thread:
            self._thread.join()

    def reset(self):
        """Nothing to reload, the system registry is fixed at startup."""
        pass
