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

from oslo_config import cfg

from bmc_shim.common.i18n import _

opts = [
    cfg.URIOpt('url',
               schemes=('http', 'https'),
               help=_('Home Assistant base URL, for example '
                      '"http://homeassistant.local:8123".')),
    cfg.StrOpt('token',
               secret=True,
               help=_('Home Assistant long-lived access token.')),
    cfg.StrOpt('entity_id',
               help=_('Switch entity driven in single-system mode, for '
                      'example "switch.server_power".')),
    cfg.ListOpt('systems',
                default=[],
                help=_('Systems exposed in multi-system mode, as a list of '
                       '"<system id>=<entity id>" pairs. Takes precedence '
                       'over entity_id and [DEFAULT]system_id.')),
    cfg.IntOpt('timeout',
               default=15,
               min=1,
               help=_('Timeout (in seconds) for requests to Home '
                      'Assistant.')),
    cfg.BoolOpt('verify_ca',
                default=True,
                help=_('Verify the TLS certificate presented by Home '
                       'Assistant.')),
]

opt_group = cfg.OptGroup(name='homeassistant',
                         title='Options for the Home Assistant backend')


def register_opts(conf):
    conf.register_group(opt_group)
    conf.register_opts(opts, group=opt_group)
