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

from bmc_shim.api import config
from bmc_shim.api import hooks
from bmc_shim.api import middleware
from bmc_shim.common import auth_basic
from bmc_shim.common import driver_factory
from bmc_shim.conf import CONF


def get_pecan_config():
    # Set up the pecan configuration
    filename = config.__file__.replace('.pyc', '.py')
    return pecan.configuration.conf_from_file(filename)


def setup_app(pecan_config=None, registry=None, extra_hooks=None):
    """Build the WSGI application serving the Redfish API.

    :param pecan_config: pecan configuration, loaded from
        :mod:`bmc_shim.api.config` when not given.
    :param registry: the SystemRegistry requests are served from, built
        from the configuration when not given.
    :param extra_hooks: additional pecan hooks.
    """
    if not pecan_config:
        pecan_config = get_pecan_config()
    if registry is None:
        registry = driver_factory.build_registry()

    app_hooks = [hooks.ConfigHook(),
                 hooks.RegistryHook(registry),
                 hooks.ContextHook()]
    if extra_hooks:
        app_hooks.extend(extra_hooks)

    pecan.configuration.set_config(dict(pecan_config), overwrite=True)

    app = pecan.make_app(
        pecan_config.app.root,
        debug=CONF.pecan_debug,
        static_root=pecan_config.app.static_root if CONF.pecan_debug else None,
        force_canonical=False,
        hooks=app_hooks,
        wrap_app=middleware.ParsableErrorMiddleware,
        # System ids such as "node.1" must not be taken for file extensions.
        guess_content_type_from_ext=False,
    )

    app = auth_basic.BasicAuthMiddleware(
        app, CONF.auth.username, CONF.auth.password,
        public_api_routes=pecan_config.app.acl_public_routes,
        realm=CONF.auth.realm)

    app = middleware.RequestLogMiddleware(app)

    return app


class WSGIApplication(object):
    def __init__(self, registry=None):
        self.app = setup_app(pecan_config=get_pecan_config(),
                             registry=registry)

    def __call__(self, environ, start_response):
        return self.app(environ, start_response)
