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
from bmc_shim.tests import base


class TestException(exception.BMCShimException):
    _msg_fmt = 'Some exception: %(spam)s, %(ham)s'


class TestBMCShimException(base.TestCase):
    def test___init___formats_message(self):
        exc = TestException(spam='spam', ham='eggs')
        self.assertEqual('Some exception: spam, eggs', str(exc))
        self.assertEqual(500, exc.code)

    def test___init___explicit_message(self):
        exc = TestException('boom')
        self.assertEqual('boom', str(exc))

    def test___init___code_override(self):
        exc = TestException(spam=1, ham=2, code=418)
        self.assertEqual(418, exc.code)
        self.assertNotIn('code', exc.kwargs)

    @mock.patch.object(exception.LOG, 'exception', autospec=True)
    def test___init___missing_kwarg(self, log_mock):
        exc = TestException(spam='spam')
        self.assertEqual(TestException._msg_fmt, str(exc))
        self.assertTrue(log_mock.called)


class TestExceptionTypes(base.TestCase):
    def test_unsupported_reset_type(self):
        exc = exception.UnsupportedResetType()
        self.assertEqual('unsupported ResetType', str(exc))
        self.assertEqual(400, exc.code)

    def test_power_action_failed_keeps_backend_message(self):
        exc = exception.PowerActionFailed(
            reason='homeassistant state: http 500')
        self.assertEqual('homeassistant state: http 500', str(exc))
        self.assertEqual(400, exc.code)

    def test_system_not_found(self):
        exc = exception.SystemNotFound(system='42')
        self.assertEqual(404, exc.code)
        self.assertIn('42', str(exc))

    def test_unauthorized_default_realm(self):
        exc = exception.Unauthorized()
        self.assertEqual(401, exc.code)
        self.assertEqual({'WWW-Authenticate': 'Basic realm="redfish"'},
                         exc.headers)

    def test_unauthorized_custom_realm(self):
        exc = exception.Unauthorized(realm='lab')
        self.assertEqual({'WWW-Authenticate': 'Basic realm="lab"'},
                         exc.headers)
        # the class default is left alone
        self.assertEqual({'WWW-Authenticate': 'Basic realm="redfish"'},
                         exception.Unauthorized.headers)

    def test_method_not_allowed_allow_header(self):
        exc = exception.MethodNotAllowed(allowed=('GET', 'PATCH'))
        self.assertEqual(405, exc.code)
        self.assertEqual({'Allow': 'GET, PATCH'}, exc.headers)

    def test_backends_unavailable(self):
        exc = exception.BackendsUnavailable()
        self.assertEqual(503, exc.code)
        self.assertEqual('all backends failed', str(exc))

    def test_command_failed(self):
        exc = exception.CommandFailed(reason='exit status 3')
        self.assertEqual('power command failed: exit status 3', str(exc))
        self.assertIsInstance(exc, exception.BackendError)
