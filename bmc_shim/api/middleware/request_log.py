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
Middleware to log API request details including timing, status codes,
and request information for debugging purposes.
"""
import collections.abc
import time

from oslo_log import log

LOG = log.getLogger('bmc_shim.api')


def get_real_ip(environ):
    """Safely retrieves the real IP address from a WSGI request."""
    # X-Forwarded-For may hold "client, proxy1, proxy2"; the client is first.
    if 'HTTP_X_FORWARDED_FOR' in environ:
        return environ['HTTP_X_FORWARDED_FOR'].split(',')[0].strip()

    elif 'HTTP_X_REAL_IP' in environ:
        return environ['HTTP_X_REAL_IP']

    else:
        return environ.get('REMOTE_ADDR')


class RequestLogMiddleware(object):
    """Middleware to log one line per request."""

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        start_time = time.time()

        method = environ.get('REQUEST_METHOD', '')
        path = environ.get('PATH_INFO', '')
        query_string = environ.get('QUERY_STRING', '')

        full_path = path
        if query_string:
            full_path = f"{path}?{query_string}"

        status_code = None

        def logging_start_response(status, headers, exc_info=None):
            nonlocal status_code
            # "200 OK" -> 200
            try:
                status_code = int(status.split(' ', 1)[0])
            except (ValueError, IndexError):
                status_code = 0
            return start_response(status, headers, exc_info)

        try:
            response = self.app(environ, logging_start_response)
            # Consume generators so the status is known when logging
            if isinstance(response, collections.abc.Iterator):
                response = list(response)
            return response
        finally:
            duration = time.time() - start_time
            duration_ms = round(duration * 1000, 2)

            LOG.info("%(source_ip)s - %(method)s %(path)s - %(status)s (%("
                     "duration)sms)",
                     {'method': method,
                      'path': full_path,
                      'status': status_code or 'unknown',
                      'duration': duration_ms,
                      'source_ip': get_real_ip(environ) or 'unknown'})
