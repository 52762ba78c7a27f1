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
Controllers for the subset of the Redfish API served by the shim.

Only the ComputerSystem resources are modelled: the service root, the
Systems collection, the system document, its boot override and the
ComputerSystem.Reset action.
"""

from oslo_log import log
import pecan

from bmc_shim.api import method
from bmc_shim.common import exception
from bmc_shim.common.i18n import _
from bmc_shim.common import power
from bmc_shim.common import states

LOG = log.getLogger(__name__)

REDFISH_ROOT = '/redfish/v1'
SYSTEMS_PATH = REDFISH_ROOT + '/Systems'
MANAGER_PATH = REDFISH_ROOT + '/Managers/1'
RESET_ACTION = 'ComputerSystem.Reset'


def service_root():
    return {
        '@odata.type': '#ServiceRoot.v1_0_0.ServiceRoot',
        '@odata.id': REDFISH_ROOT + '/',
        'Id': 'RootService',
        'Name': 'BMC Shim ServiceRoot',
        'Systems': {'@odata.id': SYSTEMS_PATH},
    }


def system_collection(registry):
    members = [{'@odata.id': '%s/%s' % (SYSTEMS_PATH, system_id)}
               for system_id in registry]
    return {
        '@odata.id': SYSTEMS_PATH,
        'Members': members,
        'Members@odata.count': len(members),
        'Name': 'Systems Collection',
    }


def system_document(context, registry, system_id):
    """Render the ComputerSystem document of a registered system.

    :raises: SystemNotFound
    """
    powered = power.get_power_state(context, registry, system_id)
    name = power.get_display_name(context, registry, system_id)
    boot = power.get_boot_override(registry, system_id)

    system_path = '%s/%s' % (SYSTEMS_PATH, system_id)
    boot_doc = {
        'BootSourceOverrideTarget': boot.target,
        'BootSourceOverrideEnabled': boot.enabled,
        'BootSourceOverrideTarget@Redfish.AllowableValues':
            list(states.ALLOWABLE_BOOT_TARGETS),
    }
    if boot.mode:
        boot_doc['BootSourceOverrideMode'] = boot.mode

    return {
        '@odata.id': system_path,
        'Id': system_id,
        'Name': name,
        'PowerState': states.POWER_ON if powered else states.POWER_OFF,
        'Boot': boot_doc,
        'Links': {
            'ManagedBy': [{'@odata.id': MANAGER_PATH}],
        },
        'Actions': {
            '#' + RESET_ACTION: {
                'target': '%s/Actions/%s' % (system_path, RESET_ACTION),
                'ResetType@Redfish.AllowableValues':
                    list(states.ALLOWABLE_RESET_TYPES),
            },
        },
    }


class ResetController(object):
    """Handles the ComputerSystem.Reset action of one system."""

    def __init__(self, system_id):
        self.system_id = system_id

    @method.expose()
    def index(self, *args, **kwargs):
        if any(args):
            pecan.abort(404)
        method.check_method('POST')
        registry = pecan.request.registry
        registry.get_backend(self.system_id)

        reset = method.request_body()
        reset_type = reset.get('ResetType', '')
        if reset_type is None:
            reset_type = ''
        if not isinstance(reset_type, str):
            raise exception.MalformedRequestBody()

        power.reset(pecan.request.context, registry, self.system_id,
                    reset_type)
        return {'status': 'ok'}


class ActionsController(object):

    def __init__(self, system_id):
        self.system_id = system_id

    @pecan.expose()
    def _lookup(self, action, *remainder):
        if action == RESET_ACTION:
            return ResetController(self.system_id), remainder
        pecan.abort(404)


class SystemController(object):
    """A single ComputerSystem resource."""

    def __init__(self, system_id):
        self.system_id = system_id
        self.Actions = ActionsController(system_id)

    @method.expose()
    def index(self, *args, **kwargs):
        if any(args):
            pecan.abort(404)
        method.check_method('GET', 'PATCH')
        registry = pecan.request.registry
        registry.get_backend(self.system_id)

        if pecan.request.method == 'PATCH':
            self._patch(registry)
        return system_document(pecan.request.context, registry,
                               self.system_id)

    def _patch(self, registry):
        boot = method.request_body().get('Boot')
        if not isinstance(boot, dict):
            raise exception.InvalidParameterValue(
                err=_('Only the "Boot" property of a system can be '
                      'updated'))
        power.set_boot_override(
            registry, self.system_id,
            target=boot.get('BootSourceOverrideTarget'),
            enabled=boot.get('BootSourceOverrideEnabled'),
            mode=boot.get('BootSourceOverrideMode'))


class SystemsController(object):
    """The Systems collection."""

    @method.expose()
    def index(self, *args, **kwargs):
        # /redfish/v1/Systems/ names a system with an empty id
        if args or pecan.request.path.endswith('/'):
            pecan.abort(404)
        method.check_method('GET')
        return system_collection(pecan.request.registry)

    @pecan.expose()
    def _lookup(self, system_id, *remainder):
        if not system_id:
            pecan.abort(404)
        return SystemController(system_id), remainder


class V1Controller(object):
    """Redfish service root."""

    Systems = SystemsController()

    @method.expose()
    def index(self, *args, **kwargs):
        if any(args):
            pecan.abort(404)
        method.check_method('GET')
        return service_root()


class RedfishController(object):

    v1 = V1Controller()
