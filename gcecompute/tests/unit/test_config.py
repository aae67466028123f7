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

from unittest import mock

from oslo_config import cfg

from gcecompute import config
from gcecompute import exceptions as ex
from gcecompute import main
from gcecompute.tests.unit import base


class ConfigTest(base.GCEComputeTestCase):
    def test_list_opts(self):
        opts = {group: [opt.name for opt in group_opts]
                for group, group_opts in config.list_opts()}

        self.assertEqual(['default_project', 'auth_token'], opts[None])
        self.assertIn('endpoint', opts['compute'])
        self.assertIn('zones', opts['compute'])
        self.assertIn('public_image_projects', opts['compute'])
        self.assertEqual(['operation_complete_interval',
                          'operation_complete_timeout'], opts['timeouts'])
        self.assertEqual(['retries_number', 'retry_after'], opts['retries'])

    def test_options_parse_on_fresh_config(self):
        conf = cfg.ConfigOpts()
        for group, group_opts in config.list_opts():
            conf.register_opts(list(group_opts), group=group)

        conf(args=[], project='gcecompute', default_config_files=[])
        conf.set_override('default_project', 'conf-project')

        self.assertEqual('conf-project', conf.default_project)
        self.assertEqual('gcecompute', conf.project)
        self.assertEqual(2, conf.timeouts.operation_complete_interval)

    @mock.patch('oslo_config.cfg.ConfigOpts.__call__')
    def test_parse_configs(self, conf_call):
        config.parse_configs(['/etc/gcecompute/gcecompute.conf'], [])

        conf_call.assert_called_once_with(
            args=[], project='gcecompute', version=mock.ANY,
            default_config_files=['/etc/gcecompute/gcecompute.conf'])

    @mock.patch('oslo_config.cfg.ConfigOpts.__call__')
    def test_parse_configs_missing_option(self, conf_call):
        conf_call.side_effect = cfg.RequiredOptError(
            'default_project', cfg.OptGroup('DEFAULT'))

        self.assertRaises(ex.ConfigurationError, config.parse_configs)


class MainTest(base.GCEComputeTestCase):
    @mock.patch('oslo_log.log.setup')
    @mock.patch('gcecompute.config.parse_configs')
    def test_setup_common(self, parse_configs, log_setup):
        main.setup_common(['gcecompute.conf'])

        parse_configs.assert_called_once_with(['gcecompute.conf'], None)
        log_setup.assert_called_once_with(main.CONF, 'gcecompute')
