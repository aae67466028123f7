# Copyright (c) 2015 Mirantis Inc.
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

import argparse
import io
from unittest import mock

from gcecompute.cli import gce_nodes
from gcecompute.compute import options
from gcecompute import exceptions as ex
from gcecompute import resources
from gcecompute.tests.unit import base

PROJECT_URL = ('https://www.googleapis.com/compute/v1beta15/projects/'
               'test-project')


def _command(**kwargs):
    defaults = {'zone': 'us-central1-a', 'machine_type': 'f1-micro',
                'image': 'centos-6', 'network': 'default',
                'group': 'default', 'tag': None, 'public_key_file': None,
                'login_user': None, 'no_nat': False, 'no_wait': False,
                'name': 'node-1', 'node_id': 'us-central1-a/node-1'}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class GCENodesCommandsTest(base.GCEComputeTestCase):
    def setUp(self):
        super(GCENodesCommandsTest, self).setUp()
        self.adapter = mock.Mock()
        self.adapter.project = 'test-project'
        patcher = mock.patch('sys.stdout', new_callable=io.StringIO)
        self.addCleanup(patcher.stop)
        self.stdout = patcher.start()

    def test_list_nodes(self):
        self.adapter.list_nodes.return_value = [resources.Instance({
            'name': 'node-1', 'status': 'RUNNING',
            'zone': PROJECT_URL + '/zones/us-central1-a',
            'machineType': 'f1-micro'})]

        gce_nodes.do_list_nodes(self.adapter, _command())

        self.assertEqual('us-central1-a/node-1\tRUNNING\tf1-micro\n',
                         self.stdout.getvalue())

    def test_list_images(self):
        self.adapter.list_images.return_value = [resources.Image({
            'name': 'centos-6', 'selfLink': 'link/centos-6'})]

        gce_nodes.do_list_images(self.adapter, _command())

        self.assertEqual('centos-6\tlink/centos-6\n', self.stdout.getvalue())

    def test_list_zones(self):
        self.adapter.list_locations.return_value = [resources.Zone({
            'name': 'us-central1-a', 'status': 'UP'})]

        gce_nodes.do_list_zones(self.adapter, _command())

        self.assertEqual('us-central1-a\tUP\n', self.stdout.getvalue())

    def test_create_node(self):
        client = self.adapter.client
        hardware = resources.MachineType({'name': 'f1-micro'})
        image = resources.Image({'name': 'centos-6'})
        client.machine_types.return_value.get_in_zone.return_value = hardware
        client.http.url_for.side_effect = (
            lambda path: 'https://host/' + path)
        self.adapter.get_image.return_value = image
        self.adapter.create_node_with_group_encoded_into_name.return_value = (
            options.NodeAndInitialCredentials(
                resources.Instance({'name': 'node-1', 'status': 'RUNNING'}),
                'us-central1-a/node-1', options.LoginCredentials()))

        gce_nodes.do_create_node(self.adapter,
                                 _command(tag=['web'], no_wait=True))

        group, name, template = (
            self.adapter.create_node_with_group_encoded_into_name
            .call_args[0])
        self.assertEqual(('default', 'node-1'), (group, name))
        self.assertIs(hardware, template.hardware)
        self.assertIs(image, template.image)
        self.assertEqual('us-central1-a', template.location)
        self.assertEqual(
            'https://host/projects/test-project/global/networks/default',
            template.options.network)
        self.assertEqual(['web'], template.options.tags)
        self.assertFalse(template.options.block_until_running)
        self.assertTrue(template.options.enable_nat)
        self.assertEqual('us-central1-a/node-1\tRUNNING\n',
                         self.stdout.getvalue())

    def test_create_node_unknown_image(self):
        self.adapter.get_image.return_value = None

        self.assertRaises(ex.NotFoundException, gce_nodes.do_create_node,
                          self.adapter, _command())
        self.assertEqual(
            0,
            self.adapter.create_node_with_group_encoded_into_name.call_count)

    def test_destroy_and_reboot(self):
        gce_nodes.do_destroy_node(self.adapter, _command())
        gce_nodes.do_reboot_node(self.adapter, _command())

        self.adapter.destroy_node.assert_called_once_with(
            'us-central1-a/node-1')
        self.adapter.reboot_node.assert_called_once_with(
            'us-central1-a/node-1')
        self.assertEqual('us-central1-a/node-1\nus-central1-a/node-1\n',
                         self.stdout.getvalue())


class GCENodesMainTest(base.GCEComputeTestCase):
    @mock.patch('gcecompute.cli.gce_nodes.CONF')
    @mock.patch('gcecompute.compute.service_adapter.ComputeServiceAdapter')
    @mock.patch('gcecompute.main.setup_common')
    def test_main(self, setup_common, adapter_cls, conf):
        self.assertEqual(0, gce_nodes.main())

        setup_common.assert_called_once_with()
        conf.command.func.assert_called_once_with(adapter_cls.return_value,
                                                  conf.command)

    @mock.patch('gcecompute.cli.gce_nodes.CONF')
    @mock.patch('gcecompute.compute.service_adapter.ComputeServiceAdapter')
    @mock.patch('gcecompute.main.setup_common')
    def test_main_failure(self, setup_common, adapter_cls, conf):
        conf.command.func.side_effect = ex.UnsupportedOperation('suspend')

        self.assertEqual(1, gce_nodes.main())
