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
from pecan import hooks

from bmc_shim.common import context


class ConfigHook(hooks.PecanHook):
    """Attach the config object to the request so controllers can get to it."""

    def before(self, state):
        state.request.cfg = cfg.CONF


class RegistryHook(hooks.PecanHook):
    """Attach the system registry to the request."""

    def __init__(self, registry):
        self.registry = registry
        super(RegistryHook, self).__init__()

    def before(self, state):
        state.request.registry = self.registry


class ContextHook(hooks.PecanHook):
    """Configures a request context and attaches it to the request.

    The context carries the request deadline which bounds the backend calls
    made while serving the request.
    """

    def before(self, state):
        ctx = context.RequestContext.from_environ(
            state.request.environ,
            timeout=cfg.CONF.api.request_timeout)
        state.request.context = ctx

    def after(self, state):
        # An incorrect url path will not create RequestContext
        if state.request.context == {}:
            return
        state.response.headers['Request-Id'] = state.request.context.request_id
