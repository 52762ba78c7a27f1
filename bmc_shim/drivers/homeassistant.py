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
Backend that drives a switch entity through the Home Assistant REST API.
"""

from oslo_log import log as logging
import requests

from bmc_shim.common import exception
from bmc_shim.common.i18n import _
from bmc_shim.drivers import base

LOG = logging.getLogger(__name__)

SWITCH_DOMAIN = 'switch'


def parse_systems(entries):
    """Parse a list of ``<system id>=<entity id>`` pairs.

    Empty entries are skipped, surrounding whitespace is ignored.

    :param entries: list of strings.
    :returns: a list of (system id, entity id) tuples.
    :raises: ConfigInvalid if an entry is malformed or nothing was parsed.
    """
    result = []
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        system_id, sep, entity_id = entry.partition('=')
        if not sep:
            raise exception.ConfigInvalid(
                error_msg=_('invalid systems entry: "%s" (expected '
                            'id=entity)') % entry)
        result.append((system_id.strip(), entity_id.strip()))

    if not result:
        raise exception.ConfigInvalid(
            error_msg=_('no valid systems parsed from '
                        '[homeassistant]systems'))
    return result


class HomeAssistantBackend(base.BaseBackend, base.PowerStateProvider,
                           base.NameProvider):
    """Power backend for one Home Assistant switch entity.

    The entity is also the source of the live power state and of the
    system's display name (its ``friendly_name`` attribute).
    """

    kind = 'homeassistant'

    def __init__(self, url, token, entity_id, timeout=15, verify=True):
        if not url or not token or not entity_id:
            raise exception.MissingParameterValue(
                err=_('homeassistant backend requires url, token, and '
                      'entity_id'))
        self.url = url.rstrip('/')
        self.entity_id = entity_id
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = verify
        self.session.headers.update({'Authorization': 'Bearer %s' % token})

    @classmethod
    def from_config(cls, conf, entity_id=None):
        group = conf.homeassistant
        return cls(group.url, group.token, entity_id or group.entity_id,
                   timeout=group.timeout, verify=group.verify_ca)

    @classmethod
    def create_systems(cls, conf):
        if not conf.homeassistant.systems:
            return super(HomeAssistantBackend, cls).create_systems(conf)
        return [(system_id, cls.from_config(conf, entity_id=entity_id))
                for system_id, entity_id
                in parse_systems(conf.homeassistant.systems)]

    def power_on(self, context):
        self._call_service(context, SWITCH_DOMAIN, 'turn_on')

    def power_off(self, context):
        self._call_service(context, SWITCH_DOMAIN, 'turn_off')

    def get_power_state(self, context):
        state, _name = self._fetch_state(context)
        return state.lower() == 'on'

    def get_display_name(self, context):
        _state, name = self._fetch_state(context)
        return name

    def _timeout(self, context):
        timeout = context.time_left(self.timeout)
        if timeout is not None and timeout <= 0:
            raise exception.HomeAssistantError(
                reason=_('request deadline exceeded'))
        return timeout

    def _call_service(self, context, domain, service):
        url = '%s/api/services/%s/%s' % (self.url, domain, service)
        try:
            response = self.session.post(
                url, json={'entity_id': self.entity_id},
                timeout=self._timeout(context))
        except requests.RequestException as e:
            LOG.warning('Call to Home Assistant service %(domain)s.'
                        '%(service)s for %(entity)s failed: %(err)s',
                        {'domain': domain, 'service': service,
                         'entity': self.entity_id, 'err': e})
            raise exception.HomeAssistantError(reason=e)

        if not 200 <= response.status_code < 300:
            raise exception.HomeAssistantError(
                reason=_('homeassistant service %(domain)s.%(service)s: '
                         'http %(status)s') % {'domain': domain,
                                               'service': service,
                                               'status': response.status_code})

    def _fetch_state(self, context):
        """Return the entity state and its friendly name.

        :returns: a tuple (state, friendly name); the name is an empty
            string when the entity has none.
        :raises: HomeAssistantError on any failure.
        """
        url = '%s/api/states/%s' % (self.url, self.entity_id)
        try:
            response = self.session.get(
                url, headers={'Accept': 'application/json'},
                timeout=self._timeout(context))
        except requests.RequestException as e:
            raise exception.HomeAssistantError(reason=e)

        if response.status_code != 200:
            raise exception.HomeAssistantError(
                reason=_('homeassistant state: http %s')
                % response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise exception.HomeAssistantError(reason=e)
        if not isinstance(body, dict):
            raise exception.HomeAssistantError(
                reason=_('homeassistant state: unexpected response'))

        state = body.get('state')
        if not isinstance(state, str):
            state = ''
        attributes = body.get('attributes')
        if not isinstance(attributes, dict):
            attributes = {}
        name = attributes.get('friendly_name')
        if not isinstance(name, str):
            name = ''
        return state, name
