# Copyright 2016 Intel Corporation
# Copyright 2013 Hewlett-Packard Development Company, L.P.
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

from oslo_config import cfg

from bmc_shim.common.i18n import _

opts = [
    cfg.HostAddressOpt('host_ip',
                       default='0.0.0.0',
                       help=_('The IP address or hostname on which the '
                              'Redfish API listens.')),
    cfg.PortOpt('port',
                default=8080,
                help=_('The TCP port on which the Redfish API listens.')),
    cfg.StrOpt('unix_socket',
               help=_('Unix socket to listen on. Disables host_ip and '
                      'port.')),
    cfg.IntOpt('request_timeout',
               default=30,
               min=1,
               help=_('Deadline (in seconds) for a single API request. '
                      'Backend calls made while serving the request are '
                      'bounded by the time left until the deadline.')),
]

opt_group = cfg.OptGroup(name='api',
                         title='Options for the Redfish API service')


def register_opts(conf):
    conf.register_group(opt_group)
    conf.register_opts(opts, group=opt_group)
