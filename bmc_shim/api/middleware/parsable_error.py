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
Middleware to replace the body of an error response with a JSON document
in the format every error of the API uses::

    {"error": {"code": 404, "message": "Not Found"}}

Bodies which already are in this format are passed through.

Based on pecan.middleware.errordocument
"""

from http import client as http_client
import json

from oslo_log import log

from bmc_shim.common.i18n import _

LOG = log.getLogger(__name__)


def _is_error_document(body):
    try:
        data = json.loads(body)
    except (ValueError, TypeError):
        return False
    return isinstance(data, dict) and isinstance(data.get('error'), dict)


class ParsableErrorMiddleware(object):
    """Replace error body with something the client can parse."""
    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        # Request for this state, modified by replace_start_response()
        # and used when an error is being reported.
        state = {}

        def replacement_start_response(status, headers, exc_info=None):
            """Overrides the default response to make errors parsable."""
            try:
                status_code = int(status.split(' ')[0])
                state['status_code'] = status_code
            except (ValueError, TypeError):  # pragma: nocover
                raise Exception(_(
                    'ErrorDocumentMiddleware received an invalid '
                    'status %s') % status)
            else:
                if (state['status_code'] // 100) not in (2, 3):
                    # Remove some headers so we can replace them later
                    # when we have the full error message and can
                    # compute the length.
                    headers = [(h, v)
                               for (h, v) in headers
                               if h.lower() not in ('content-length',
                                                    'content-type')
                               ]
                # Save the headers in case we need to modify them.
                state['headers'] = headers
                state['status'] = status
                return start_response(status, headers, exc_info)

        # Pecan renders HTML errors unless JSON is explicitly accepted.
        if 'HTTP_ACCEPT' not in environ or environ['HTTP_ACCEPT'] == '*/*':
            environ['HTTP_ACCEPT'] = 'application/json'

        app_iter = self.app(environ, replacement_start_response)
        if (state['status_code'] // 100) not in (2, 3):
            body = b''.join(app_iter)
            if hasattr(app_iter, 'close'):
                app_iter.close()
            if not _is_error_document(body):
                message = http_client.responses.get(
                    state['status_code'],
                    state['status'].split(' ', 1)[-1])
                body = json.dumps({'error': {'code': state['status_code'],
                                             'message': message}})
                body = body.encode('utf-8')
            state['headers'].append(('Content-Type', 'application/json'))
            state['headers'].append(('Content-Length', str(len(body))))
            body = [body]
        else:
            body = app_iter
        return body
