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
Backend that only logs power actions.

Useful for trying out a provisioning flow without touching any hardware.
"""

from oslo_log import log as logging

from bmc_shim.drivers import base

LOG = logging.getLogger(__name__)


class NoopBackend(base.BaseBackend):
    """Power backend which logs and always succeeds."""

    kind = 'noop'

    @classmethod
    def from_config(cls, conf):
        return cls()

    def power_on(self, context):
        LOG.info('noop backend: PowerOn')

    def power_off(self, context):
        LOG.info('noop backend: PowerOff')
