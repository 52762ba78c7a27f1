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

import json

import webob

from bmc_shim.api.middleware import parsable_error
from bmc_shim.tests import base


class TestParsableErrorMiddleware(base.TestCase):

    def _call(self, app, accept=None):
        wrapped = parsable_error.ParsableErrorMiddleware(app)
        request = webob.Request.blank('/redfish/v1/Systems/1')
        if accept is not None:
            request.headers['Accept'] = accept
        return request.get_response(wrapped), request

    def test_success_untouched(self):
        def app(environ, start_response):
            start_response('200 OK', [('Content-Type', 'text/plain')])
            return [b'ok']

        response, _request = self._call(app)
        self.assertEqual(200, response.status_int)
        self.assertEqual(b'ok', response.body)
        self.assertEqual('text/plain', response.content_type)

    def test_plain_error_replaced(self):
        def app(environ, start_response):
            start_response('404 Not Found', [('Content-Type', 'text/html'),
                                             ('Content-Length', '9')])
            return [b'<h1></h1>']

        response, _request = self._call(app)
        self.assertEqual(404, response.status_int)
        self.assertEqual('application/json', response.content_type)
        self.assertEqual({'error': {'code': 404, 'message': 'Not Found'}},
                         json.loads(response.body))

    def test_error_document_passed_through(self):
        body = json.dumps({'error': {'code': 400,
                                     'message': 'unsupported ResetType'}})

        def app(environ, start_response):
            start_response('400 Bad Request',
                           [('Content-Type', 'application/json')])
            return [body.encode('utf-8')]

        response, _request = self._call(app)
        self.assertEqual(400, response.status_int)
        self.assertEqual(body.encode('utf-8'), response.body)
        self.assertEqual(str(len(body)), response.headers['Content-Length'])

    def test_accept_defaults_to_json(self):
        seen = {}

        def app(environ, start_response):
            seen['accept'] = environ.get('HTTP_ACCEPT')
            start_response('200 OK', [])
            return [b'']

        self._call(app)
        self.assertEqual('application/json', seen['accept'])
        self._call(app, accept='*/*')
        self.assertEqual('application/json', seen['accept'])
        self._call(app, accept='text/plain')
        self.assertEqual('text/plain', seen['accept'])
