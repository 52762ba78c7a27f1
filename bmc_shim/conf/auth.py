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
    cfg.StrOpt('username',
               default='',
               help=_('User name required for HTTP basic authentication. '
                      'Authentication is disabled when both username and '
                      'password are empty.')),
    cfg.StrOpt('password',
               default='',
               secret=True,
               help=_('Password required for HTTP basic authentication.')),
    cfg.StrOpt('realm',
               default='redfish',
               help=_('Realm advertised in the WWW-Authenticate challenge.')),
]

opt_group = cfg.OptGroup(name='auth',
                         title='HTTP basic authentication options')


def register_opts(conf):
    conf.register_group(opt_group)
    conf.register_opts(opts, group=opt_group)
