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
Power state reconciliation and reset actions for registered systems.
"""

import time

from oslo_log import log

from bmc_shim.common import exception
from bmc_shim.common.i18n import _
from bmc_shim.common import registry as system_registry
from bmc_shim.common import states
from bmc_shim.conf import CONF
from bmc_shim.drivers import base


LOG = log.getLogger(__name__)


def get_power_state(context, registry, system_id):
    """Decide whether a system is powered on.

    A backend able to report the live state is asked first and its answer
    is returned as is; it is not written into the cache. The cached last
    known state is used when the backend can not report a state or the
    query fails.

    :param context: a RequestContext.
    :param registry: a SystemRegistry.
    :param system_id: id of the system.
    :returns: True if the system is on.
    :raises: SystemNotFound
    """
    backend = registry.get_backend(system_id)
    if base.supports(backend, base.PowerStateProvider):
        try:
            return backend.get_power_state(context)
        except exception.BackendError as e:
            LOG.warning('Could not get the power state of system '
                        '%(system)s, using the last known state. '
                        'Error: %(err)s', {'system': system_id, 'err': e})
    return registry.get_last_power_state(system_id)


def get_display_name(context, registry, system_id):
    """Return the display name of a system.

    The backend name is used when the backend can supply a non-empty one,
    otherwise the name is derived from the system id.
    """
    backend = registry.get_backend(system_id)
    if base.supports(backend, base.NameProvider):
        try:
            name = backend.get_display_name(context)
        except exception.BackendError as e:
            LOG.debug('Could not get the display name of system '
                      '%(system)s: %(err)s', {'system': system_id, 'err': e})
        else:
            if name:
                return name
    return 'System %s' % system_id


def get_boot_override(registry, system_id):
    """Return the boot override of a system, defaults if never set.

    Defaults are not stored.
    """
    registry.get_backend(system_id)
    boot = registry.get_boot_override(system_id)
    if boot is None or not boot.target:
        boot = system_registry.DEFAULT_BOOT_OVERRIDE
    return boot


def set_boot_override(registry, system_id, target=None, enabled=None,
                      mode=None):
    """Validate and store a boot override. The value is cosmetic.

    :raises: SystemNotFound, InvalidParameterValue
    :returns: the resulting BootOverride.
    """
    registry.get_backend(system_id)
    for value, allowed, field in (
            (target, states.ALLOWABLE_BOOT_TARGETS,
             'BootSourceOverrideTarget'),
            (enabled, states.ALLOWABLE_BOOT_ENABLED,
             'BootSourceOverrideEnabled'),
            (mode, states.ALLOWABLE_BOOT_MODES,
             'BootSourceOverrideMode')):
        if value is not None and value not in allowed:
            raise exception.InvalidParameterValue(
                err=_('Invalid %(field)s "%(value)s", allowed values are: '
                      '%(allowed)s') % {'field': field, 'value': value,
                                        'allowed': ', '.join(allowed)})
    boot = registry.update_boot_override(system_id, target=target,
                                         enabled=enabled, mode=mode)
    LOG.info('Boot override of system %(system)s set to %(boot)s',
             {'system': system_id, 'boot': boot})
    return boot


def reset(context, registry, system_id, reset_type):
    """Apply a Redfish reset action to a system.

    ``On`` powers on, ``ForceOff``, ``GracefulShutdown`` and ``Off`` power
    off, ``ForceRestart`` and ``GracefulRestart`` power off, sleep for
    [power]restart_delay and power on. The sleep is not cut short by the
    request deadline, so a restart that has started always finishes.

    The cached power state is updated only once every backend call of the
    action has succeeded.

    :param context: a RequestContext.
    :param registry: a SystemRegistry.
    :param system_id: id of the system.
    :param reset_type: the requested ResetType keyword.
    :raises: SystemNotFound if the system is not registered.
    :raises: UnsupportedResetType for an unknown keyword; no backend call
        is made.
    :raises: PowerActionFailed if a backend call fails; the cached state
        is left untouched.
    """
    backend = registry.get_backend(system_id)
    action = states.RESET_ACTIONS.get(reset_type)
    if action is None:
        raise exception.UnsupportedResetType()

    LOG.info('Applying %(reset)s (%(action)s) to system %(system)s',
             {'reset': reset_type, 'action': action, 'system': system_id})
    try:
        if action == states.POWER_ON_ACTION:
            backend.power_on(context)
            new_state = True
        elif action == states.POWER_OFF_ACTION:
            backend.power_off(context)
            new_state = False
        else:
            backend.power_off(context)
            time.sleep(CONF.power.restart_delay)
            backend.power_on(context)
            new_state = True
    except exception.BackendError as e:
        LOG.error('%(reset)s of system %(system)s failed: %(err)s',
                  {'reset': reset_type, 'system': system_id, 'err': e})
        raise exception.PowerActionFailed(reason=str(e))

    registry.set_last_power_state(system_id, new_state)
    return new_state
