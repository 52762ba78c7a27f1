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

import os
import tempfile

import fixtures

from bmc_shim.common import config
from bmc_shim.conf import CONF
from bmc_shim.conf import opts
from bmc_shim.tests import base


class ListOptsTestCase(base.TestCase):

    def test_list_opts(self):
        groups = dict(opts.list_opts())
        self.assertEqual({'DEFAULT', 'api', 'auth', 'command',
                          'homeassistant', 'power'}, set(groups))
        names = {o.name for o in groups['DEFAULT']}
        self.assertIn('backend', names)
        self.assertIn('system_id', names)

    def test_defaults(self):
        self.assertEqual('noop', CONF.backend)
        self.assertEqual('1', CONF.system_id)
        self.assertEqual(8080, CONF.api.port)
        self.assertEqual(2.0, CONF.power.restart_delay)
        self.assertEqual(60, CONF.command.timeout)
        self.assertEqual(15, CONF.homeassistant.timeout)
        self.assertEqual('redfish', CONF.auth.realm)


class ParseArgsTestCase(base.TestCase):

    def test_environment_override(self):
        self.useFixture(fixtures.EnvironmentVariable('OS_API__PORT', '9000'))
        self.useFixture(fixtures.EnvironmentVariable('OS_DEFAULT__BACKEND',
                                                     'command'))
        config.parse_args([], default_config_files=[])
        self.assertEqual(9000, CONF.api.port)
        self.assertEqual('command', CONF.backend)

    def test_config_file_from_environment(self):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.conf',
                                         delete=False) as f:
            f.write('[DEFAULT]\nsystem_id = node-9\n'
                    '[power]\nrestart_delay = 0.5\n')
        self.addCleanup(os.remove, f.name)
        self.useFixture(fixtures.EnvironmentVariable('BMC_SHIM_CONFIG_FILE',
                                                     f.name))
        config.parse_args([])
        self.assertEqual('node-9', CONF.system_id)
        self.assertEqual(0.5, CONF.power.restart_delay)

    def test_config_dir_from_environment(self):
        conf_dir = self.useFixture(fixtures.TempDir()).path
        with open(os.path.join(conf_dir, 'shim.conf'), 'w') as f:
            f.write('[DEFAULT]\nsystem_id = from-dir\n')
        self.useFixture(fixtures.EnvironmentVariable('BMC_SHIM_CONFIG_DIR',
                                                     conf_dir))
        config.parse_args([], default_config_files=[])
        self.assertEqual('from-dir', CONF.system_id)

    def test_explicit_files_win_over_environment(self):
        self.useFixture(fixtures.EnvironmentVariable('BMC_SHIM_CONFIG_FILE',
                                                     '/nonexistent.conf'))
        self.assertEqual((['/etc/shim.conf'], None),
                         config._env_locations(['/etc/shim.conf']))
