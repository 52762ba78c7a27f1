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

import functools
from http import client as http_client
import json
import sys
import traceback

from oslo_config import cfg
from oslo_log import log
import pecan

from bmc_shim.common import exception

LOG = log.getLogger(__name__)


pecan_json_decorate = pecan.expose(
    content_type='application/json',
    generic=False)


def expose(status_code=None):

    def decorate(f):

        @functools.wraps(f)
        def callfunction(self, *args, **kwargs):
            try:
                result = f(self, *args, **kwargs)
                if status_code:
                    pecan.response.status = status_code

            except Exception:
                try:
                    exception_info = sys.exc_info()
                    orig_exception = exception_info[1]
                    orig_code = getattr(orig_exception, 'code', None)
                    result = format_exception(
                        exception_info,
                        cfg.CONF.debug_tracebacks_in_api
                    )
                finally:
                    del exception_info

                if orig_code and orig_code in http_client.responses:
                    pecan.response.status = orig_code
                else:
                    pecan.response.status = 500
                if isinstance(orig_exception, exception.BMCShimException):
                    for name, value in orig_exception.headers.items():
                        pecan.response.headers[name] = value

            return json.dumps(result)

        pecan_json_decorate(callfunction)
        return callfunction

    return decorate


def request_body():
    """Decode the JSON object carried by the current request.

    :returns: the decoded dictionary.
    :raises: MalformedRequestBody if the body is not a JSON object.
    """
    try:
        data = pecan.request.json
    except ValueError as e:
        LOG.debug('Could not decode request body: %s', e)
        raise exception.MalformedRequestBody()
    if not isinstance(data, dict):
        raise exception.MalformedRequestBody()
    return data


def check_method(*allowed):
    """Reject a request whose HTTP method is not one of ``allowed``.

    :raises: MethodNotAllowed
    """
    if pecan.request.method not in allowed:
        raise exception.MethodNotAllowed(allowed=allowed)


def format_exception(excinfo, debug=False):
    """Extract informations that can be sent to the client."""
    error = excinfo[1]
    code = getattr(error, 'code', None)
    if code and code in http_client.responses and (400 <= code < 500):
        message = str(error)
        LOG.debug("Client-side error: %s", message)
        return {'error': {'code': code, 'message': message}}
    else:
        message = str(error)
        debuginfo = "\n".join(traceback.format_exception(*excinfo))

        LOG.error('Server-side error: "%s". Detail: \n%s',
                  message, debuginfo)

        r = {'error': {'code': http_client.INTERNAL_SERVER_ERROR,
                       'message': message}}
        if code and code in http_client.responses:
            r['error']['code'] = code
        if debug:
            r['error']['debuginfo'] = debuginfo
        return r
