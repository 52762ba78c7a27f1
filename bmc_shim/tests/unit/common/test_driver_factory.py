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

from unittest import mock

from stevedore import driver

from bmc_shim.common import driver_factory
from bmc_shim.common import exception
from bmc_shim.drivers import command
from bmc_shim.drivers import noop
from bmc_shim.tests import base


class GetBackendClassTestCase(base.TestCase):

    @mock.patch.object(driver, 'DriverManager', autospec=True)
    def test_load(self, mock_mgr):
        mock_mgr.return_value.driver = noop.NoopBackend
        self.assertIs(noop.NoopBackend,
                      driver_factory.get_backend_class('noop'))
        mock_mgr.assert_called_once_with('bmc_shim.backends', 'noop',
                                         invoke_on_load=False)

    @mock.patch.object(driver, 'DriverManager', autospec=True)
    def test_load_failure(self, mock_mgr):
        mock_mgr.side_effect = RuntimeError('No such backend')
        exc = self.assertRaises(exception.BackendLoadError,
                                driver_factory.get_backend_class, 'ipmi')
        self.assertIn('ipmi', str(exc))


@mock.patch.object(driver_factory, 'get_backend_class', autospec=True)
class BuildRegistryTestCase(base.TestCase):

    def test_noop(self, mock_get):
        mock_get.return_value = noop.NoopBackend
        self.config(system_id='node-1')
        reg = driver_factory.build_registry()
        mock_get.assert_called_once_with('noop')
        self.assertEqual(['node-1'], list(reg))
        self.assertIsInstance(reg.get_backend('node-1'), noop.NoopBackend)

    def test_command(self, mock_get):
        mock_get.return_value = command.CommandBackend
        self.config(backend='command')
        self.config(on_command='on', off_command='off', group='command')
        reg = driver_factory.build_registry()
        mock_get.assert_called_once_with('command')
        self.assertIsInstance(reg.get_backend('1'), command.CommandBackend)

    def test_invalid_backend_config_is_fatal(self, mock_get):
        mock_get.return_value = command.CommandBackend
        self.config(backend='command')
        self.assertRaises(exception.MissingParameterValue,
                          driver_factory.build_registry)
