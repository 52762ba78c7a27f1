# Copyright 2020 Red Hat, Inc.
# All Rights Reserved.
#
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

import base64
import binascii
import re

from oslo_log import log as logging
import webob

from bmc_shim.common import exception
from bmc_shim.common.i18n import _

LOG = logging.getLogger(__name__)


class BasicAuthMiddleware(object):
    """Middleware which performs HTTP basic authentication on requests

    Requests to public routes are always passed through. When neither a
    username nor a password is configured, every request is passed through.
    """
    def __init__(self, app, username, password, public_api_routes=None,
                 realm=None):
        self.app = app
        self.username = username or ''
        self.password = password or ''
        self.realm = realm
        api_routes = [] if public_api_routes is None else public_api_routes
        try:
            self.public_api_routes = [re.compile('%s$' % route_tpl)
                                      for route_tpl in api_routes]
        except re.error as e:
            raise exception.ConfigInvalid(
                error_msg=_('Cannot compile public API routes: %s') % e)

    @property
    def enabled(self):
        return bool(self.username or self.password)

    def format_exception(self, e):
        result = {'error': {'message': str(e), 'code': e.code}}
        headers = list(e.headers.items()) + [
            ('Content-Type', 'application/json')
        ]
        return webob.Response(content_type='application/json',
                              status_code=e.code,
                              json_body=result,
                              headerlist=headers)

    def is_public(self, env):
        path = (env.get('PATH_INFO') or '').rstrip('/')
        return any(pattern.match(path) for pattern in self.public_api_routes)

    def __call__(self, env, start_response):
        env['is_public_api'] = self.is_public(env)
        if env['is_public_api'] or not self.enabled:
            return self.app(env, start_response)

        try:
            token = parse_header(env, self.realm)
            username, password = parse_token(token, self.realm)
            env.update(authenticate(self.username, self.password,
                                    username, password, self.realm))

            return self.app(env, start_response)

        except exception.Unauthorized as e:
            response = self.format_exception(e)
            return response(env, start_response)


def authenticate(expected_username, expected_password, username, password,
                 realm=None):
    """Compare presented credentials with the configured pair

    Both values must be exactly equal to the configured ones.

    :param: expected_username: configured username
    :param: expected_password: configured password
    :param: username: username presented by the client
    :param: password: password presented by the client, as bytes
    :param: realm: realm to use in the authentication challenge
    :returns: A dictionary of WSGI environment values to append to the request
    :raises: Unauthorized, if the credentials do not match
    """
    if (username != expected_username
            or password != expected_password.encode('utf-8')):
        LOG.info('Invalid credentials presented for user %s', username)
        unauthorized(realm=realm)

    return {
        'HTTP_X_USER': username,
        'HTTP_X_USER_NAME': username
    }


def parse_token(token, realm=None):
    """Parse the token portion of the Authentication header value

    :param: token: Token value from basic authorization header
    :param: realm: realm to use in the authentication challenge
    :returns: tuple of username, password
    :raises: Unauthorized, if username and password could not be parsed for any
            reason
    """
    try:
        if isinstance(token, str):
            token = token.encode('utf-8')
        auth_pair = base64.b64decode(token, validate=True)
        (username, password) = auth_pair.split(b':', maxsplit=1)

        return (username.decode('utf-8'), password)
    except (TypeError, binascii.Error, ValueError) as exc:
        LOG.info('Could not decode authorization token: %s', exc)
        unauthorized(realm=realm)


def parse_header(env, realm=None):
    """Parse WSGI environment for Authorization header of type Basic

    :param: env: WSGI environment to get header from
    :param: realm: realm to use in the authentication challenge
    :returns: Token portion of the header value
    :raises: Unauthorized, if header is missing, malformed or if the type is
            not Basic
    """
    try:
        auth_header = env.pop('HTTP_AUTHORIZATION')
    except KeyError:
        LOG.info('No authorization token received')
        unauthorized(realm=realm)
    try:
        auth_type, token = auth_header.strip().split(maxsplit=1)
    except (ValueError, AttributeError) as exc:
        LOG.info('Could not parse Authorization header: %s', exc)
        unauthorized(realm=realm)

    if auth_type.lower() != 'basic':
        LOG.info('Unsupported authorization type "%s"', auth_type)
        unauthorized(realm=realm)
    return token


def unauthorized(message=None, realm=None):
    """Raise an Unauthorized exception to prompt for basic authentication

    :param: message: Optional message for exception
    :param: realm: realm to use in the authentication challenge
    :raises: Unauthorized with WWW-Authenticate header set
    """
    raise exception.Unauthorized(message, realm=realm)
