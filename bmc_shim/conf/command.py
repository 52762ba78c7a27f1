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
    cfg.StrOpt('on_command',
               help=_('Shell command executed to power the system on. '
                      'Required when backend is "command".')),
    cfg.StrOpt('off_command',
               help=_('Shell command executed to power the system off. '
                      'Required when backend is "command".')),
    cfg.StrOpt('shell',
               default='sh',
               help=_('Shell used to run on_command and off_command. It is '
                      'invoked as a login shell with "-lc".')),
    cfg.IntOpt('timeout',
               default=60,
               min=1,
               help=_('Maximum time (in seconds) a power command may run '
                      'before it is killed.')),
]

opt_group = cfg.OptGroup(name='command',
                         title='Options for the shell command backend')


def register_opts(conf):
    conf.register_group(opt_group)
    conf.register_opts(opts, group=opt_group)
