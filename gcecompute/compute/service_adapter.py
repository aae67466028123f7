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

from oslo_config import cfg
from oslo_log import log as logging

from gcecompute.client import http_client
from gcecompute.client import templates
from gcecompute.compute import options as node_options
from gcecompute import context
from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute import resources
from gcecompute.service import provisioning
from gcecompute.utils import poll_utils

LOG = logging.getLogger(__name__)

DEFAULT_LOGIN_USER = 'root'
PUBLIC_IMAGE_PROJECT = 'google'

opts = [
    cfg.ListOpt('zones',
                default=[],
                help='Zones to list nodes and machine types in. All zones '
                     'of the project are used when empty.'),
    cfg.ListOpt('public_image_projects',
                default=[PUBLIC_IMAGE_PROJECT],
                help='Projects whose images are offered next to the images '
                     'of the user project.'),
]

CONF = cfg.CONF
CONF.register_opts(opts, group=http_client.compute_group)


def _self_link(resource):
    if resource is None:
        return None
    if isinstance(resource, str):
        return resource
    return getattr(resource, 'self_link', None)


def _unique(items):
    seen = set()
    result = []
    for item in items:
        key = item.self_link or item.get('name')
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def credentials_from_image(image_credentials, options):
    """Login credentials of a new node.

    The image stores '<public key>:<private key>' in the private key
    field of its default credentials. The private half is kept, the
    public half is authorized on the options unless they already carry
    a public key. Login settings of the options win over the image
    defaults. The result is also stored on the options.
    """
    credentials = image_credentials or node_options.LoginCredentials()

    if credentials.private_key:
        if ':' not in credentials.private_key:
            raise ex.InvalidDataException(
                _("Default credentials of the image should hold "
                  "'<public key>:<private key>'"))
        public_key, private_key = credentials.private_key.split(':', 1)
        credentials = credentials.replace(private_key=private_key)
        if options.public_key is None:
            options.authorize_public_key(public_key)

    if options.has_login_private_key_option():
        credentials = credentials.replace(
            private_key=options.login_private_key)
    if options.login_user is not None:
        credentials = credentials.replace(user=options.login_user)
    if options.has_login_password_option():
        credentials = credentials.replace(password=options.login_password)
    if options.authenticate_sudo is not None:
        credentials = credentials.replace(
            authenticate_sudo=options.authenticate_sudo)

    options.override_login_credentials(credentials)
    return credentials


def metadata_from_template_options(options):
    metadata = dict(options.user_metadata)
    if options.public_key:
        credentials = options.login_credentials
        user = (credentials and credentials.user) or DEFAULT_LOGIN_USER
        metadata['sshKeys'] = '{user}:{key} {user}@localhost'.format(
            user=user, key=options.public_key.strip())
    return metadata


class ComputeServiceAdapter(object):
    """Node level view of the compute API.

    Nodes are identified by '<zone>/<instance name>'.
    """

    def __init__(self, client, project=None, zone_ids=None,
                 wait_config=None, metadata_from_options=None):
        self._client = client
        self._project = project or context.current_project()
        if not self._project:
            raise ex.ConfigurationError(
                _("Project is not set neither in the request context "
                  "nor in the configuration"))
        self._zone_ids = list(zone_ids) if zone_ids else None
        self._wait_config = wait_config or poll_utils.WaitConfig.from_conf()
        self._metadata_from_options = (metadata_from_options or
                                       metadata_from_template_options)

    @property
    def client(self):
        return self._client

    @property
    def project(self):
        return self._project

    def zone_ids(self):
        if self._zone_ids:
            return self._zone_ids
        if CONF.compute.zones:
            return list(CONF.compute.zones)
        return [zone.name for zone in self.list_locations()]

    def _instances(self):
        return self._client.instances(self._project)

    def _operations(self):
        return self._client.zone_operations(self._project)

    def create_node_with_group_encoded_into_name(self, group, name,
                                                 template):
        if template is None:
            raise ex.InvalidDataException(_("Template is required"))

        options = template.options.clone()
        if not options.network:
            raise ex.IncorrectStateError(
                _("network was not present in template options"))
        machine_type = _self_link(template.hardware)
        if not machine_type:
            raise ex.InvalidDataException(_("hardware uri must be set"))
        image = _self_link(template.image)
        if not image:
            raise ex.InvalidDataException(_("image URI is null"))
        zone = getattr(template.location, 'name', template.location)

        instance_template = templates.InstanceTemplate(
            machine_type=machine_type, image=image)
        if options.enable_nat:
            instance_template.add_network_interface(
                options.network, templates.ACCESS_CONFIG_ONE_TO_ONE_NAT)
        else:
            instance_template.add_network_interface(options.network)

        credentials = credentials_from_image(template.image_credentials,
                                             options)

        for key, value in self._metadata_from_options(options).items():
            instance_template.add_metadata(key, value)
        for tag in options.tags:
            instance_template.add_tag(tag)
        for account in options.service_accounts:
            instance_template.add_service_account(
                account['email'], account.get('scopes', ()))

        instances = self._instances()
        LOG.info("Creating node {name} of group {group} in zone "
                 "{zone}".format(name=name, group=group, zone=zone))

        node = provisioning.provision_node(
            name,
            lambda: instances.create_in_zone(zone, name, instance_template),
            self._operations().refresh,
            lambda node_name: instances.get_in_zone(zone, node_name),
            config=self._wait_config,
            block_until_done=options.block_until_running)

        node_id = resources.SlashEncodedIds.from_two_ids(
            zone, name).slash_encoded
        return node_options.NodeAndInitialCredentials(node, node_id,
                                                      credentials)

    def list_hardware_profiles(self):
        machine_types = self._client.machine_types(self._project)
        profiles = []
        for zone in self.zone_ids():
            profiles.extend(machine_types.list_in_zone(zone).concat())
        return _unique(profiles)

    def _image_projects(self):
        return [self._project] + [p for p in CONF.compute.public_image_projects
                                  if p != self._project]

    def list_images(self):
        images = []
        for project in self._image_projects():
            images.extend(self._client.images(project).list().concat())
        return _unique(images)

    def get_image(self, image_id):
        for project in self._image_projects():
            image = self._client.images(project).get(image_id)
            if image is not None:
                return image
        return None

    def list_locations(self):
        return self._client.zones(self._project).list().concat()

    def get_node(self, node_id):
        ids = resources.SlashEncodedIds.from_slash_encoded(node_id)
        return self._instances().get_in_zone(ids.first_id, ids.second_id)

    def list_nodes(self):
        instances = self._instances()
        nodes = []
        for zone in self.zone_ids():
            nodes.extend(instances.list_in_zone(zone).concat())
        return nodes

    def list_nodes_by_ids(self, ids):
        ids = set(ids)
        return [node for node in self.list_nodes()
                if node.name in ids or node.slash_encoded_id in ids]

    def destroy_node(self, node_id):
        ids = resources.SlashEncodedIds.from_slash_encoded(node_id)
        operation = self._instances().delete_in_zone(ids.first_id,
                                                     ids.second_id)
        if operation is None:
            LOG.info("Node {id} is already gone".format(id=node_id))
            return
        self._wait_operation_done(operation)

    def reboot_node(self, node_id):
        ids = resources.SlashEncodedIds.from_slash_encoded(node_id)
        operation = self._instances().reset_in_zone(ids.first_id,
                                                    ids.second_id)
        if operation is None:
            raise ex.NotFoundException(node_id)
        self._wait_operation_done(operation)

    def resume_node(self, node_id):
        raise ex.UnsupportedOperation('resume')

    def suspend_node(self, node_id):
        raise ex.UnsupportedOperation('suspend')

    def _wait_operation_done(self, operation):
        return poll_utils.wait_until_done(
            operation, self._operations().refresh, self._wait_config)
