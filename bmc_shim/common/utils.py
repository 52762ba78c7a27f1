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

"""Utilities and helper functions."""

import os

from oslo_concurrency import processutils
from oslo_log import log as logging
from oslo_utils import excutils


LOG = logging.getLogger(__name__)


def execute(*cmd, **kwargs):
    """Run a power command through processutils.execute().

    The command line is logged before it runs. Output of a command that
    exits with an error is logged at debug level before the error is
    re-raised.

    :param cmd: the command line, passed to processutils.execute()
    :param kwargs: keyword arguments to pass to processutils.execute(),
        usually ``timeout``
    :returns: (stdout, stderr) of the command
    :raises: ProcessExecutionError on a non-zero exit status
    :raises: subprocess.TimeoutExpired if ``timeout`` is reached
    :raises: OSError if the command could not be started
    """
    LOG.debug('Running power command: %s', ' '.join(map(str, cmd)))
    try:
        return processutils.execute(*cmd, **kwargs)
    except processutils.ProcessExecutionError as exc:
        with excutils.save_and_reraise_exception():
            LOG.debug('Power command exited with %(code)s. '
                      'stdout: "%(out)s", stderr: "%(err)s"',
                      {'code': exc.exit_code, 'out': exc.stdout,
                       'err': exc.stderr})


def unlink_without_raise(path):
    """Remove a file, ignoring a file that is already gone."""
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        LOG.warning("Failed to unlink %(path)s, error: %(e)s",
                    {'path': path, 'e': e})
