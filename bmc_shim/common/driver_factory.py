# Copyright 2013 Red Hat, Inc.
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

from oslo_log import log
from stevedore import driver

from bmc_shim.common import exception
from bmc_shim.common import registry
from bmc_shim.conf import CONF


LOG = log.getLogger(__name__)

_ENTRYPOINT_NAME = 'bmc_shim.backends'


def get_backend_class(kind):
    """Load the backend class registered under the given name.

    :param kind: name of the backend entry point, e.g. "noop".
    :raises: BackendLoadError if no such backend is installed or it fails
        to load.
    """
    try:
        mgr = driver.DriverManager(_ENTRYPOINT_NAME, kind,
                                   invoke_on_load=False)
    except Exception as e:
        raise exception.BackendLoadError(backend=kind, reason=e)
    return mgr.driver


def build_registry(conf=CONF):
    """Create the system registry described by the configuration.

    Configuration errors are fatal: the exception propagates and the
    service does not start.

    :param conf: the oslo.config configuration object.
    :returns: a SystemRegistry.
    :raises: BackendLoadError, MissingParameterValue, ConfigInvalid.
    """
    backend_class = get_backend_class(conf.backend)
    systems = backend_class.create_systems(conf)
    result = registry.SystemRegistry(systems)
    LOG.info('Loaded %(kind)s backend for systems: %(ids)s',
             {'kind': conf.backend, 'ids': ', '.join(result)})
    return result
