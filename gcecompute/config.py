# Copyright (c) 2013 Mirantis Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import itertools

from oslo_config import cfg
from oslo_log import log

from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute import version


CONF = cfg.CONF

log.register_options(CONF)

gcecompute_default_log_levels = [
    'requests=WARN',
    'urllib3=WARN',
]

log.set_defaults(
    default_log_levels=(log.get_default_log_levels() +
                        gcecompute_default_log_levels))


def list_opts():
    # NOTE: imported here so that every option is registered before it
    # is listed, whatever modules the caller imported so far.
    from gcecompute.client import base
    from gcecompute.client import http_client
    from gcecompute.compute import service_adapter
    from gcecompute import context
    from gcecompute.utils import poll_utils

    return [
        (None,
         itertools.chain(context.opts)),
        (http_client.compute_group.name,
         itertools.chain(http_client.opts,
                         service_adapter.opts)),
        (poll_utils.timeouts.name,
         itertools.chain(poll_utils.timeouts_opts)),
        (base.retries.name,
         itertools.chain(base.opts)),
    ]


def parse_configs(conf_files=None, args=None):
    try:
        CONF(args=args, project='gcecompute',
             version=version.version_string,
             default_config_files=conf_files)
    except cfg.RequiredOptError as roe:
        raise ex.ConfigurationError(
            _("Option '%(option)s' is required for config group '%(group)s'") %
            {'option': roe.opt_name, 'group': roe.group.name})
