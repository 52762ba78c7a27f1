# Copyright 2016 Intel Corporation
# Copyright 2013 Hewlett-Packard Development Company, L.P.
# Copyright 2013 International Business Machines Corporation
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

backend_opts = [
    cfg.StrOpt('backend',
               default='noop',
               choices=[('noop', _('log power actions and do nothing else')),
                        ('command', _('run a shell command per power '
                                      'action')),
                        ('homeassistant', _('drive a Home Assistant switch '
                                            'entity'))],
               help=_('Power backend used for every system.')),
    cfg.StrOpt('system_id',
               default='1',
               help=_('Redfish system ID path segment used in single-system '
                      'mode.')),
]

api_opts = [
    cfg.BoolOpt('debug_tracebacks_in_api',
                default=False,
                help=_('Return server tracebacks in the API response for any '
                       'error responses. WARNING: this is insecure '
                       'and should not be used in a production environment.')),
    cfg.BoolOpt('pecan_debug',
                default=False,
                help=_('Enable pecan debug mode. WARNING: this is insecure '
                       'and should not be used in a production environment.')),
]


def register_opts(conf):
    conf.register_opts(backend_opts)
    conf.register_opts(api_opts)


def list_opts():
    return backend_opts + api_opts
