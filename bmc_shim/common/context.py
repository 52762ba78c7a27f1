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

import time

from oslo_context import context


class RequestContext(context.RequestContext):
    """Extends security contexts from the oslo.context library."""

    def __init__(self, timeout=None, **kwargs):
        """Initialize the RequestContext

        :param timeout: Number of seconds the request may take. Backend calls
            made on behalf of the request are bounded by the time left.
            ``None`` means no deadline.
        :param kwargs: additional arguments passed to oslo.context.
        """
        super(RequestContext, self).__init__(**kwargs)
        self.deadline = _deadline(timeout)

    @classmethod
    def from_environ(cls, environ, timeout=None, **kwargs):
        """Load a context object from a request environment.

        :param environ: The environment dictionary associated with a request.
        :type environ: dict
        :param timeout: Number of seconds the request may take.
        """
        context = super().from_environ(environ, **kwargs)
        context.deadline = _deadline(timeout)
        return context

    def time_left(self, limit=None):
        """Return the number of seconds left before the deadline.

        :param limit: upper bound for the returned value, usually the
            timeout configured for a particular backend.
        :returns: seconds left, never negative, or ``limit`` when the
            context has no deadline.
        """
        if self.deadline is None:
            return limit
        left = max(self.deadline - time.monotonic(), 0)
        if limit is not None:
            left = min(left, limit)
        return left


def _deadline(timeout):
    return None if timeout is None else time.monotonic() + timeout


def get_admin_context():
    """Create a context without a deadline for internal calls."""
    return RequestContext(overwrite=False)
