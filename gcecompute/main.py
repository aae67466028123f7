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

from oslo_config import cfg
from oslo_log import log

from gcecompute import config
# registers the options read by setup_common
from gcecompute.client import http_client  # noqa

LOG = log.getLogger(__name__)

CONF = cfg.CONF


def setup_common(config_files=None, args=None):
    config.parse_configs(config_files, args)
    log.setup(CONF, "gcecompute")

    LOG.debug("Using compute API at {endpoint} for project {project}".format(
        endpoint=CONF.compute.endpoint, project=CONF.default_project))
