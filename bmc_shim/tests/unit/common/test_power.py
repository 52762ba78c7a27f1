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

from bmc_shim.common import exception
from bmc_shim.common import power
from bmc_shim.common import registry
from bmc_shim.tests import base
from bmc_shim.tests.unit import fakes


class GetPowerStateTestCase(base.TestCase):

    def test_cached_state_without_live_query(self):
        reg = registry.SystemRegistry({'1': fakes.FakeBackend()})
        self.assertFalse(power.get_power_state(self.context, reg, '1'))
        reg.set_last_power_state('1', True)
        self.assertTrue(power.get_power_state(self.context, reg, '1'))

    def test_live_state_wins(self):
        backend = fakes.FakeStateBackend(power_state=True)
        reg = registry.SystemRegistry({'1': backend})
        self.assertTrue(power.get_power_state(self.context, reg, '1'))
        backend.power_state = False
        reg.set_last_power_state('1', True)
        self.assertFalse(power.get_power_state(self.context, reg, '1'))

    def test_live_state_not_cached(self):
        reg = registry.SystemRegistry(
            {'1': fakes.FakeStateBackend(power_state=True)})
        power.get_power_state(self.context, reg, '1')
        self.assertFalse(reg.get_last_power_state('1'))

    def test_query_failure_falls_back_to_cache(self):
        reg = registry.SystemRegistry(
            {'1': fakes.FakeStateBackend(power_state=False,
                                         query_error=True)})
        reg.set_last_power_state('1', True)
        self.assertTrue(power.get_power_state(self.context, reg, '1'))

    def test_unknown_system(self):
        reg = registry.SystemRegistry({'1': fakes.FakeBackend()})
        self.assertRaises(exception.SystemNotFound,
                          power.get_power_state, self.context, reg, '2')


class GetDisplayNameTestCase(base.TestCase):

    def test_default_name(self):
        reg = registry.SystemRegistry({'node-1': fakes.FakeBackend()})
        self.assertEqual('System node-1',
                         power.get_display_name(self.context, reg, 'node-1'))

    def test_backend_name(self):
        reg = registry.SystemRegistry(
            {'1': fakes.FakeStateBackend(name='Rack 3 server')})
        self.assertEqual('Rack 3 server',
                         power.get_display_name(self.context, reg, '1'))

    def test_empty_backend_name(self):
        reg = registry.SystemRegistry({'1': fakes.FakeStateBackend(name='')})
        self.assertEqual('System 1',
                         power.get_display_name(self.context, reg, '1'))

    def test_backend_failure(self):
        reg = registry.SystemRegistry(
            {'1': fakes.FakeStateBackend(name='x', query_error=True)})
        self.assertEqual('System 1',
                         power.get_display_name(self.context, reg, '1'))


class BootOverrideTestCase(base.TestCase):

    def setUp(self):
        super(BootOverrideTestCase, self).setUp()
        self.registry = registry.SystemRegistry({'1': fakes.FakeBackend()})

    def test_defaults(self):
        boot = power.get_boot_override(self.registry, '1')
        self.assertEqual(('None', 'Disabled', None), boot)
        self.assertIsNone(self.registry.get_boot_override('1'))

    def test_set(self):
        boot = power.set_boot_override(self.registry, '1', target='Pxe',
                                       enabled='Once', mode='UEFI')
        self.assertEqual(('Pxe', 'Once', 'UEFI'), boot)
        self.assertEqual(boot, power.get_boot_override(self.registry, '1'))

    def test_set_partial(self):
        power.set_boot_override(self.registry, '1', target='Hdd')
        boot = power.set_boot_override(self.registry, '1',
                                       enabled='Continuous')
        self.assertEqual(('Hdd', 'Continuous', None), boot)

    def test_set_invalid(self):
        for kwargs in ({'target': 'Floppy'}, {'enabled': 'Always'},
                       {'mode': 'BIOS'}):
            self.assertRaises(exception.InvalidParameterValue,
                              power.set_boot_override, self.registry, '1',
                              **kwargs)
        self.assertIsNone(self.registry.get_boot_override('1'))

    def test_unknown_system(self):
        self.assertRaises(exception.SystemNotFound,
                          power.set_boot_override, self.registry, '2',
                          target='Pxe')
        self.assertRaises(exception.SystemNotFound,
                          power.get_boot_override, self.registry, '2')


@mock.patch.object(power.time, 'sleep', autospec=True)
class ResetTestCase(base.TestCase):

    def setUp(self):
        super(ResetTestCase, self).setUp()
        self.backend = fakes.FakeBackend()
        self.registry = registry.SystemRegistry({'1': self.backend})

    def _do_reset(self, reset_type):
        return power.reset(self.context, self.registry, '1', reset_type)

    def test_on(self, mock_sleep):
        self.assertTrue(self._do_reset('On'))
        self.assertEqual(['power_on'], self.backend.calls)
        self.assertTrue(self.registry.get_last_power_state('1'))
        self.assertFalse(mock_sleep.called)

    def test_power_off_types(self, mock_sleep):
        for reset_type in ('ForceOff', 'GracefulShutdown', 'Off'):
            self.registry.set_last_power_state('1', True)
            self.backend.calls = []
            self.assertFalse(self._do_reset(reset_type))
            self.assertEqual(['power_off'], self.backend.calls)
            self.assertFalse(self.registry.get_last_power_state('1'))
        self.assertFalse(mock_sleep.called)

    def test_restart_types(self, mock_sleep):
        self.config(restart_delay=0.5, group='power')
        for reset_type in ('ForceRestart', 'GracefulRestart'):
            self.backend.calls = []
            mock_sleep.reset_mock()
            self.assertTrue(self._do_reset(reset_type))
            self.assertEqual(['power_off', 'power_on'], self.backend.calls)
            mock_sleep.assert_called_once_with(0.5)
            self.assertTrue(self.registry.get_last_power_state('1'))

    def test_restart_default_delay(self, mock_sleep):
        self._do_reset('ForceRestart')
        mock_sleep.assert_called_once_with(2.0)

    def test_unsupported(self, mock_sleep):
        for reset_type in ('PowerCycle', 'Nmi', '', 'on'):
            self.assertRaises(exception.UnsupportedResetType,
                              self._do_reset, reset_type)
        self.assertEqual([], self.backend.calls)
        self.assertFalse(self.registry.get_last_power_state('1'))

    def test_unknown_system_before_reset_type(self, mock_sleep):
        self.assertRaises(exception.SystemNotFound,
                          power.reset, self.context, self.registry, '2',
                          'Bogus')

    def test_on_failure_keeps_cache(self, mock_sleep):
        self.backend.fail_on = 'power_on'
        exc = self.assertRaises(exception.PowerActionFailed,
                                self._do_reset, 'On')
        self.assertEqual('power_on failed', str(exc))
        self.assertEqual(400, exc.code)
        self.assertFalse(self.registry.get_last_power_state('1'))

    @mock.patch.object(fakes.FakeBackend, 'power_on', autospec=True)
    def test_failure_message_passed_through(self, mock_on, mock_sleep):
        mock_on.side_effect = exception.CommandFailed(reason='exit status 3')
        exc = self.assertRaises(exception.PowerActionFailed,
                                self._do_reset, 'On')
        self.assertEqual('power command failed: exit status 3', str(exc))

    def test_off_failure_keeps_cache(self, mock_sleep):
        self.registry.set_last_power_state('1', True)
        self.backend.fail_on = 'power_off'
        self.assertRaises(exception.PowerActionFailed,
                          self._do_reset, 'ForceOff')
        self.assertTrue(self.registry.get_last_power_state('1'))

    def test_restart_off_failure(self, mock_sleep):
        self.backend.fail_on = 'power_off'
        self.assertRaises(exception.PowerActionFailed,
                          self._do_reset, 'ForceRestart')
        self.assertEqual(['power_off'], self.backend.calls)
        self.assertFalse(mock_sleep.called)
        self.assertFalse(self.registry.get_last_power_state('1'))

    def test_restart_on_failure(self, mock_sleep):
        self.backend.fail_on = 'power_on'
        self.assertRaises(exception.PowerActionFailed,
                          self._do_reset, 'GracefulRestart')
        self.assertEqual(['power_off', 'power_on'], self.backend.calls)
        self.assertTrue(mock_sleep.called)
        self.assertFalse(self.registry.get_last_power_state('1'))
