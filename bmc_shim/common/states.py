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
Constants for the Redfish power and boot vocabulary served by the shim.

A system has exactly two power states. ``ResetType`` keywords received on
the ComputerSystem.Reset action map onto one of three power actions; the
mapping is :data:`RESET_ACTIONS`.
"""

##############
# Power states
##############

POWER_ON = 'On'
""" Redfish PowerState value of a powered system. """

POWER_OFF = 'Off'
""" Redfish PowerState value of an unpowered system. """

###############
# Power actions
###############

POWER_ON_ACTION = 'power on'
""" Call PowerOn on the backend. """

POWER_OFF_ACTION = 'power off'
""" Call PowerOff on the backend. """

RESTART_ACTION = 'restart'
""" Call PowerOff, wait the settle interval, then call PowerOn. """

#############
# Reset types
#############

RESET_ON = 'On'
RESET_FORCE_OFF = 'ForceOff'
RESET_GRACEFUL_SHUTDOWN = 'GracefulShutdown'
RESET_OFF = 'Off'
RESET_FORCE_RESTART = 'ForceRestart'
RESET_GRACEFUL_RESTART = 'GracefulRestart'

RESET_ACTIONS = {
    RESET_ON: POWER_ON_ACTION,
    RESET_FORCE_OFF: POWER_OFF_ACTION,
    RESET_GRACEFUL_SHUTDOWN: POWER_OFF_ACTION,
    RESET_OFF: POWER_OFF_ACTION,
    RESET_FORCE_RESTART: RESTART_ACTION,
    RESET_GRACEFUL_RESTART: RESTART_ACTION,
}
""" Mapping of accepted ResetType keywords to power actions. """

ALLOWABLE_RESET_TYPES = [RESET_ON, RESET_FORCE_OFF, RESET_GRACEFUL_SHUTDOWN,
                         RESET_FORCE_RESTART]
""" ResetType values advertised in the system document. """

######################
# Boot source override
######################

BOOT_TARGET_NONE = 'None'
BOOT_TARGET_PXE = 'Pxe'
BOOT_TARGET_HDD = 'Hdd'

ALLOWABLE_BOOT_TARGETS = [BOOT_TARGET_NONE, BOOT_TARGET_PXE, BOOT_TARGET_HDD]

BOOT_DISABLED = 'Disabled'
BOOT_ONCE = 'Once'
BOOT_CONTINUOUS = 'Continuous'

ALLOWABLE_BOOT_ENABLED = [BOOT_DISABLED, BOOT_ONCE, BOOT_CONTINUOUS]

ALLOWABLE_BOOT_MODES = ['UEFI', 'Legacy']
