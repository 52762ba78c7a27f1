# -*- encoding: utf-8 -*-
#
# Copyright 2013 Hewlett-Packard Development Company, L.P.
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
"""
Abstract base classes for power backends.

Every backend implements :class:`BaseBackend`. The optional capabilities a
backend may add are expressed as separate abstract classes which the
backend inherits in addition to :class:`BaseBackend`. Callers check for a
capability with :func:`supports` and fall back to a default when it is
absent.
"""

import abc


class BaseBackend(object, metaclass=abc.ABCMeta):
    """Minimal power control capability every backend provides."""

    kind = None
    """Name of the backend, as used in the [DEFAULT]backend option."""

    @abc.abstractmethod
    def power_on(self, context):
        """Turn the power on.

        :param context: a RequestContext bounding the call.
        :raises: BackendError on failure.
        """

    @abc.abstractmethod
    def power_off(self, context):
        """Turn the power off.

        :param context: a RequestContext bounding the call.
        :raises: BackendError on failure.
        """

    @classmethod
    def create_systems(cls, conf):
        """Create backends for every system described by the configuration.

        The default is single-system mode: one backend registered under
        ``[DEFAULT]system_id``.

        :param conf: the oslo.config configuration object.
        :returns: a list of (system id, backend) tuples.
        :raises: MissingParameterValue or ConfigInvalid if the
            configuration does not describe a usable backend.
        """
        return [(conf.system_id, cls.from_config(conf))]

    @classmethod
    @abc.abstractmethod
    def from_config(cls, conf):
        """Create a single backend instance from the configuration."""


class PowerStateProvider(object, metaclass=abc.ABCMeta):
    """Capability: report the live power state."""

    @abc.abstractmethod
    def get_power_state(self, context):
        """Return True if the system is powered on.

        :raises: BackendError if the state can not be determined.
        """


class NameProvider(object, metaclass=abc.ABCMeta):
    """Capability: supply a friendly display name for the system."""

    @abc.abstractmethod
    def get_display_name(self, context):
        """Return the display name, or an empty string if there is none.

        :raises: BackendError if the name can not be determined.
        """


class HealthChecker(object, metaclass=abc.ABCMeta):
    """Capability: check that the backend is reachable."""

    @abc.abstractmethod
    def ping(self, context):
        """Check the health of the backend.

        :raises: BackendError if the backend is not healthy.
        """


def supports(backend, capability):
    """Check whether a backend provides an optional capability.

    :param backend: a BaseBackend instance.
    :param capability: one of PowerStateProvider, NameProvider or
        HealthChecker.
    """
    return isinstance(backend, capability)
