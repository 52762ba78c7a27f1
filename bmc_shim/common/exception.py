# Copyright 2010 United States Government as represented by the
# Administrator of the National Aeronautics and Space Administration.
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

"""BMC shim specific exceptions list."""

from http import client as http_client

from oslo_log import log as logging

from bmc_shim.common.i18n import _

LOG = logging.getLogger(__name__)


class BMCShimException(Exception):
    """Base BMC shim Exception

    To correctly use this class, inherit from it and define
    a '_msg_fmt' property. That _msg_fmt will get printf'd
    with the keyword arguments provided to the constructor.

    If you need to access the message from an exception you should use
    str(exc)

    """

    _msg_fmt = _("An unknown exception occurred.")
    code = http_client.INTERNAL_SERVER_ERROR
    headers = {}

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if 'code' in kwargs:
            self.code = int(kwargs.pop('code'))

        if not message:
            try:
                message = self._msg_fmt % kwargs
            except (KeyError, TypeError, ValueError):
                # kwargs doesn't match a variable in the message
                # log the issue and the kwargs
                prs = ', '.join('%s=%s' % pair for pair in kwargs.items())
                LOG.exception('Exception in string format operation '
                              '(arguments %s)', prs)
                # at least get the core message out if something happened
                message = self._msg_fmt

        super(BMCShimException, self).__init__(message)


class Invalid(BMCShimException):
    _msg_fmt = _("Unacceptable parameters.")
    code = http_client.BAD_REQUEST


class InvalidParameterValue(Invalid):
    _msg_fmt = "%(err)s"


class MissingParameterValue(InvalidParameterValue):
    _msg_fmt = "%(err)s"


class MalformedRequestBody(Invalid):
    _msg_fmt = _("bad request")


class UnsupportedResetType(Invalid):
    _msg_fmt = _("unsupported ResetType")


class PowerActionFailed(Invalid):
    """A backend call failed; the message is the backend's own message."""
    _msg_fmt = "%(reason)s"


class NotFound(BMCShimException):
    _msg_fmt = _("Resource could not be found.")
    code = http_client.NOT_FOUND


class SystemNotFound(NotFound):
    _msg_fmt = _("System %(system)s could not be found.")


class MethodNotAllowed(BMCShimException):
    _msg_fmt = _("method not allowed")
    code = http_client.METHOD_NOT_ALLOWED

    def __init__(self, message=None, allowed=None, **kwargs):
        super(MethodNotAllowed, self).__init__(message, **kwargs)
        if allowed:
            self.headers = {'Allow': ', '.join(allowed)}


class Unauthorized(BMCShimException):
    _msg_fmt = _("unauthorized")
    code = http_client.UNAUTHORIZED
    headers = {'WWW-Authenticate': 'Basic realm="redfish"'}

    def __init__(self, message=None, realm=None, **kwargs):
        super(Unauthorized, self).__init__(message, **kwargs)
        if realm:
            self.headers = {'WWW-Authenticate': 'Basic realm="%s"' % realm}


class ServiceUnavailable(BMCShimException):
    _msg_fmt = _("Service temporarily unavailable.")
    code = http_client.SERVICE_UNAVAILABLE


class BackendsUnavailable(ServiceUnavailable):
    _msg_fmt = _("all backends failed")


class ConfigInvalid(BMCShimException):
    _msg_fmt = _("Invalid configuration. %(error_msg)s")


class BackendLoadError(BMCShimException):
    _msg_fmt = _("Backend %(backend)s could not be loaded. "
                 "Reason: %(reason)s.")


class BackendError(BMCShimException):
    """Base class for failures reported by a power backend."""
    _msg_fmt = _("Backend operation failed: %(reason)s")


class CommandFailed(BackendError):
    _msg_fmt = _("power command failed: %(reason)s")


class HomeAssistantError(BackendError):
    _msg_fmt = "%(reason)s"
