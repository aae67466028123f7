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

import sys

from oslo_config import cfg
from oslo_log import log as logging

from gcecompute.client import api
from gcecompute.compute import options
from gcecompute.compute import service_adapter
from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute import main as gce_main

LOG = logging.getLogger(__name__)

CONF = cfg.CONF


def do_list_nodes(adapter, command):
    for node in adapter.list_nodes():
        print('{id}\t{status}\t{machine_type}'.format(
            id=node.slash_encoded_id, status=node.status,
            machine_type=node.machine_type))


def do_list_images(adapter, command):
    for image in adapter.list_images():
        print('{name}\t{link}'.format(name=image.name,
                                      link=image.self_link))


def do_list_zones(adapter, command):
    for zone in adapter.list_locations():
        print('{name}\t{status}'.format(name=zone.name, status=zone.status))


def _read_public_key(path):
    if not path:
        return None
    with open(path) as key_file:
        return key_file.read().strip()


def do_create_node(adapter, command):
    client = adapter.client
    hardware = client.machine_types(adapter.project).get_in_zone(
        command.zone, command.machine_type)
    if hardware is None:
        raise ex.NotFoundException(
            command.machine_type, _("Machine type '%s' is not found"))
    image = adapter.get_image(command.image)
    if image is None:
        raise ex.NotFoundException(command.image,
                                   _("Image '%s' is not found"))

    network = command.network
    if not network.startswith(('http://', 'https://')):
        network = client.http.url_for('/'.join(
            ('projects', adapter.project, 'global', 'networks', network)))

    template_options = options.TemplateOptions(
        network=network,
        enable_nat=not command.no_nat,
        tags=command.tag or (),
        public_key=_read_public_key(command.public_key_file),
        login_user=command.login_user,
        block_until_running=not command.no_wait)
    template = options.Template(hardware, image, command.zone,
                                template_options)

    result = adapter.create_node_with_group_encoded_into_name(
        command.group, command.name, template)
    print('{id}\t{status}'.format(id=result.node_id,
                                  status=result.node.status))


def do_destroy_node(adapter, command):
    adapter.destroy_node(command.node_id)
    print(command.node_id)


def do_reboot_node(adapter, command):
    adapter.reboot_node(command.node_id)
    print(command.node_id)


def add_command_parsers(subparsers):
    parser = subparsers.add_parser('list-nodes')
    parser.set_defaults(func=do_list_nodes)

    parser = subparsers.add_parser('list-images')
    parser.set_defaults(func=do_list_images)

    parser = subparsers.add_parser('list-zones')
    parser.set_defaults(func=do_list_zones)

    parser = subparsers.add_parser('create-node')
    parser.add_argument('--zone', required=True)
    parser.add_argument('--machine-type', required=True)
    parser.add_argument('--image', required=True)
    parser.add_argument('--network', default='default')
    parser.add_argument('--group', default='default')
    parser.add_argument('--tag', action='append')
    parser.add_argument('--public-key-file')
    parser.add_argument('--login-user')
    parser.add_argument('--no-nat', action='store_true')
    parser.add_argument('--no-wait', action='store_true')
    parser.add_argument('name')
    parser.set_defaults(func=do_create_node)

    for name, func in (('destroy-node', do_destroy_node),
                       ('reboot-node', do_reboot_node)):
        parser = subparsers.add_parser(name)
        parser.add_argument('node_id', help='<zone>/<instance name>')
        parser.set_defaults(func=func)


command_opt = cfg.SubCommandOpt('command',
                                title='Command',
                                help='Available commands',
                                handler=add_command_parsers)

CONF.register_cli_opt(command_opt)


def main():
    gce_main.setup_common()

    try:
        adapter = service_adapter.ComputeServiceAdapter(api.ComputeClient())
        CONF.command.func(adapter, CONF.command)
    except ex.GCEComputeException as e:
        LOG.error("Command {name} failed: {error}".format(
            name=CONF.command.name, error=e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
