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

"""Request bodies of the calls creating or changing resources."""

import copy

from gcecompute import exceptions as ex
from gcecompute.i18n import _


ACCESS_CONFIG_ONE_TO_ONE_NAT = 'ONE_TO_ONE_NAT'

DISK_TYPE_SCRATCH = 'SCRATCH'
DISK_TYPE_PERSISTENT = 'PERSISTENT'
DISK_TYPES = (DISK_TYPE_SCRATCH, DISK_TYPE_PERSISTENT)

DISK_MODE_READ_WRITE = 'READ_WRITE'
DISK_MODE_READ_ONLY = 'READ_ONLY'
DISK_MODES = (DISK_MODE_READ_WRITE, DISK_MODE_READ_ONLY)

DEPRECATION_STATES = ('DEPRECATED', 'OBSOLETE', 'DELETED')


def _check_choice(value, choices, what):
    if value not in choices:
        raise ex.InvalidDataException(
            _("%(what)s should be one of %(choices)s, got %(value)s")
            % {'what': what, 'choices': ', '.join(choices), 'value': value})


class InstanceTemplate(object):
    """Description of an instance to create.

    The machine type is either a full URL or '<zone>/<machine type>',
    the latter being expanded by the instance API of the project.
    """

    def __init__(self, machine_type=None, image=None, description=None):
        self.machine_type = machine_type
        self.image = image
        self.description = description
        self.network_interfaces = []
        self.disks = []
        self.tags = []
        self.metadata = {}
        self.service_accounts = []

    def add_network_interface(self, network, access_config_type=None):
        interface = {'network': network}
        if access_config_type:
            interface['accessConfigs'] = [{'type': access_config_type}]
        self.network_interfaces.append(interface)
        return self

    def add_disk(self, mode, source, disk_type=DISK_TYPE_PERSISTENT):
        _check_choice(mode, DISK_MODES, 'Disk mode')
        _check_choice(disk_type, DISK_TYPES, 'Disk type')
        self.disks.append({'mode': mode, 'source': source,
                           'type': disk_type})
        return self

    def add_tag(self, tag):
        self.tags.append(tag)
        return self

    def add_metadata(self, key, value):
        self.metadata[key] = value
        return self

    def add_service_account(self, email, scopes=()):
        self.service_accounts.append({'email': email,
                                      'scopes': list(scopes)})
        return self

    def to_dict(self, name, machine_type_url):
        if not self.image:
            raise ex.InvalidDataException(_("Instance image is not set"))

        body = {
            'name': name,
            'machineType': machine_type_url,
            'image': self.image,
            'networkInterfaces': copy.deepcopy(self.network_interfaces),
        }
        if self.description:
            body['description'] = self.description
        if self.disks:
            body['disks'] = copy.deepcopy(self.disks)
        if self.tags:
            body['tags'] = {'items': list(self.tags)}
        if self.metadata:
            body['metadata'] = {
                'kind': 'compute#metadata',
                'items': [{'key': k, 'value': v}
                          for k, v in sorted(self.metadata.items())]}
        if self.service_accounts:
            body['serviceAccounts'] = copy.deepcopy(self.service_accounts)
        return body


class AttachDiskOptions(object):
    """Options for attaching disks to instances."""

    def __init__(self, disk_type, mode, source=None, device_name=None):
        _check_choice(disk_type, DISK_TYPES, 'Disk type')
        _check_choice(mode, DISK_MODES, 'Disk mode')
        if disk_type == DISK_TYPE_PERSISTENT and not source:
            raise ex.InvalidDataException(
                _("Persistent disks need a source disk"))
        self.disk_type = disk_type
        self.mode = mode
        self.source = source
        self.device_name = device_name

    def to_dict(self):
        body = {'type': self.disk_type, 'mode': self.mode}
        if self.source:
            body['source'] = self.source
        if self.device_name:
            body['deviceName'] = self.device_name
        return body


class DeprecateOptions(object):
    """Deprecation status of an image, an empty one clears it."""

    def __init__(self, state=None, replacement=None, deprecated=None,
                 obsolete=None, deleted=None):
        if state is not None:
            _check_choice(state, DEPRECATION_STATES, 'Deprecation state')
        self.state = state
        self.replacement = replacement
        self.deprecated = deprecated
        self.obsolete = obsolete
        self.deleted = deleted

    def to_dict(self):
        fields = (('state', self.state),
                  ('replacement', self.replacement),
                  ('deprecated', self.deprecated),
                  ('obsolete', self.obsolete),
                  ('deleted', self.deleted))
        return {k: v for k, v in fields if v is not None}
