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
Backend that runs a shell command for each power action.
"""

import subprocess

from oslo_concurrency import processutils
from oslo_log import log as logging

from bmc_shim.common import exception
from bmc_shim.common.i18n import _
from bmc_shim.common import utils
from bmc_shim.drivers import base

LOG = logging.getLogger(__name__)


class CommandBackend(base.BaseBackend, base.HealthChecker):
    """Power backend which runs an on-command and an off-command.

    Each call spawns its own process, so concurrent calls never share
    state. The backend has nothing to probe and always reports healthy.
    """

    kind = 'command'

    def __init__(self, on_command, off_command, shell='sh', timeout=60):
        if not on_command or not off_command:
            raise exception.MissingParameterValue(
                err=_('command backend requires both [command]on_command '
                      'and [command]off_command'))
        self.on_command = on_command
        self.off_command = off_command
        self.shell = shell
        self.timeout = timeout

    @classmethod
    def from_config(cls, conf):
        return cls(conf.command.on_command, conf.command.off_command,
                   shell=conf.command.shell, timeout=conf.command.timeout)

    def power_on(self, context):
        self._run(context, self.on_command)

    def power_off(self, context):
        self._run(context, self.off_command)

    def ping(self, context):
        pass

    def _run(self, context, command):
        timeout = context.time_left(self.timeout)
        if timeout is not None and timeout <= 0:
            raise exception.CommandFailed(
                reason=_('request deadline exceeded'))
        try:
            utils.execute(self.shell, '-lc', command, timeout=timeout)
        except processutils.ProcessExecutionError as e:
            LOG.warning('Power command "%(cmd)s" exited with %(code)s',
                        {'cmd': command, 'code': e.exit_code})
            raise exception.CommandFailed(
                reason=_('exit status %s') % e.exit_code)
        except subprocess.TimeoutExpired:
            LOG.warning('Power command "%(cmd)s" did not finish within '
                        '%(timeout)s seconds', {'cmd': command,
                                                'timeout': timeout})
            raise exception.CommandFailed(
                reason=_('timed out after %s seconds') % timeout)
        except OSError as e:
            LOG.warning('Power command "%(cmd)s" could not be started: '
                        '%(err)s', {'cmd': command, 'err': e})
            raise exception.CommandFailed(reason=e)
