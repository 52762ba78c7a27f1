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
    cfg.FloatOpt('restart_delay',
                 default=2.0,
                 min=0,
                 help=_('Time (in seconds) to wait between powering a system '
                        'off and powering it back on for ForceRestart and '
                        'GracefulRestart. The wait is not interrupted when '
                        'the client goes away.')),
]

opt_group = cfg.OptGroup(name='power',
                         title='Power action options')


def register_opts(conf):
    conf.register_group(opt_group)
    conf.register_opts(opts, group=opt_group)
