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
"""
Service readiness computed from the health of the power backends.
"""

from oslo_log import log

from bmc_shim.common import exception
from bmc_shim.drivers import base


LOG = log.getLogger(__name__)

ASSUME_HEALTHY_WITHOUT_CHECK = True
"""Readiness policy for backends that can not be health checked.

When True, a backend without the HealthChecker capability counts as a
healthy backend, which makes the whole service ready as soon as one such
backend is registered.
"""


def is_ready(context, registry):
    """Check whether the service can be considered usable.

    The service is ready when no system is registered, or when at least one
    backend is healthy. Backends are checked in registry order and the
    check stops at the first healthy one.

    :param context: a RequestContext.
    :param registry: a SystemRegistry.
    :returns: True if the service is ready.
    """
    if not len(registry):
        return True

    for system_id, backend in registry.items():
        if not base.supports(backend, base.HealthChecker):
            if ASSUME_HEALTHY_WITHOUT_CHECK:
                return True
            continue
        try:
            backend.ping(context)
        except exception.BackendError as e:
            LOG.warning('Backend of system %(system)s is not healthy: '
                        '%(err)s', {'system': system_id, 'err': e})
        else:
            return True

    LOG.error('None of the %d backends is healthy', len(registry))
    return False
