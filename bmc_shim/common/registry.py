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
Registry of the systems served by the API and their cached state.

The mapping of system ids to backends is fixed when the registry is
created. The only mutable data are the last known power state and the
boot override of each system, both guarded by a single reader/writer
lock.
"""

import collections
import types

from oslo_concurrency import lockutils

from bmc_shim.common import exception
from bmc_shim.common.i18n import _
from bmc_shim.common import states


BootOverride = collections.namedtuple(
    'BootOverride', ['target', 'enabled', 'mode'])

DEFAULT_BOOT_OVERRIDE = BootOverride(states.BOOT_TARGET_NONE,
                                     states.BOOT_DISABLED, None)


class SystemRegistry(object):
    """Immutable id to backend mapping plus the per-system state cache."""

    def __init__(self, systems=None):
        """Create the registry.

        :param systems: a mapping or an iterable of (system id, backend)
            pairs.
        :raises: ConfigInvalid if a system id is empty or used twice.
        """
        items = systems.items() if hasattr(systems, 'items') else systems
        backends = {}
        for system_id, backend in items or ():
            if not system_id:
                raise exception.ConfigInvalid(
                    error_msg=_('system id must not be empty'))
            if system_id in backends:
                raise exception.ConfigInvalid(
                    error_msg=_('duplicate system id "%s"') % system_id)
            backends[system_id] = backend

        self._backends = types.MappingProxyType(backends)
        self._lock = lockutils.ReaderWriterLock()
        self._last_power_state = {}
        self._boot = {}

    def __contains__(self, system_id):
        return system_id in self._backends

    def __iter__(self):
        return iter(self._backends)

    def __len__(self):
        return len(self._backends)

    def items(self):
        return self._backends.items()

    def get_backend(self, system_id):
        """Return the backend of a system.

        :raises: SystemNotFound if the id is not registered.
        """
        try:
            return self._backends[system_id]
        except KeyError:
            raise exception.SystemNotFound(system=system_id)

    def get_last_power_state(self, system_id):
        """Return the cached power state, False if it was never set."""
        with self._lock.read_lock():
            return self._last_power_state.get(system_id, False)

    def set_last_power_state(self, system_id, power_on):
        with self._lock.write_lock():
            self._last_power_state[system_id] = bool(power_on)

    def get_boot_override(self, system_id):
        """Return the stored BootOverride, or None if it was never set."""
        with self._lock.read_lock():
            return self._boot.get(system_id)

    def update_boot_override(self, system_id, **changes):
        """Merge changes into the stored BootOverride and return the result.

        Fields not given keep their current value, or the default value if
        nothing was stored yet.
        """
        changes = {k: v for k, v in changes.items() if v is not None}
        with self._lock.write_lock():
            current = self._boot.get(system_id) or DEFAULT_BOOT_OVERRIDE
            boot = current._replace(**changes)
            self._boot[system_id] = boot
            return boot
