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

"""Provides means to wrap dicts coming from the compute API in objects.

The API answers with JSON documents only. This module wraps a fetched
document, always a dictionary, into an immutable Resource object.
Descendants of Resource add snake_case accessors and helper methods
for the fields the rest of the code relies on.
"""

import functools

from oslo_utils import timeutils

from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute.utils import types


OPERATION_PENDING = 'PENDING'
OPERATION_RUNNING = 'RUNNING'
OPERATION_DONE = 'DONE'

OPERATION_STATUSES = (OPERATION_PENDING, OPERATION_RUNNING, OPERATION_DONE)

REGION_UP = 'UP'
REGION_DOWN = 'DOWN'


def wrap(resource_class):
    """A decorator wraps dict returned by a given function into a Resource."""

    def decorator(func):
        @functools.wraps(func)
        def handle(*args, **kwargs):
            ret = func(*args, **kwargs)
            if isinstance(ret, types.ListPage):
                return types.ListPage([resource_class(el) for el in ret],
                                      ret.next_page_token)
            elif isinstance(ret, list):
                return [resource_class(el) for el in ret]
            elif ret:
                return resource_class(ret)
            else:
                return None

        return handle

    return decorator


def last_segment(url):
    """Returns the trailing path segment of a resource URL."""
    if not url:
        return url
    return url.rstrip('/').rsplit('/', 1)[-1]


class Resource(types.FrozenDict):
    """Represents dictionary as an immutable object.

    For instance, the following dictionary:
    {'first': {'a': 1, 'b': 2}, 'second': [1,2,3]}

    after wrapping with Resource will look like an object, let it be
    'res' with the following fields:
    res.first
    res.second

    'res.first' will in turn be wrapped into Resource with two fields:
    res.first.a == 1
    res.first.b == 2

    'res.second', which is a list, will be transformed into a frozen
    list for immutability.
    """

    _resource_name = 'resource'

    def __init__(self, dct):
        newdct = dict()
        for refname, entity in dct.items():
            newdct[refname] = self._wrap_entity(entity)

        super(Resource, self).__init__(newdct)

    def to_dict(self):
        return self._entity_to_dict(self)

    # Construction

    def _wrap_entity(self, entity):
        if isinstance(entity, Resource):
            return entity
        elif isinstance(entity, list):
            return types.FrozenList([self._wrap_entity(e) for e in entity])
        elif isinstance(entity, dict):
            return Resource(entity)
        elif self._is_passthrough_type(entity):
            return entity
        else:
            raise TypeError(_("Unsupported type: %s") % type(entity).__name__)

    def _is_passthrough_type(self, entity):
        return (entity is None or
                isinstance(entity, (bool, int, float, str)))

    # Conversion to dict

    def _entity_to_dict(self, entity):
        if isinstance(entity, dict):
            return {k: self._entity_to_dict(v) for k, v in entity.items()}
        elif isinstance(entity, list):
            return [self._entity_to_dict(e) for e in entity]
        return entity

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            raise AttributeError(item)

    def __setattr__(self, *args):
        raise ex.FrozenClassError(self)

    def __deepcopy__(self, memo):
        return self

    # Fields shared by every compute resource

    @property
    def self_link(self):
        return self.get('selfLink')

    @property
    def creation_timestamp(self):
        value = self.get('creationTimestamp')
        return timeutils.parse_isotime(value) if value else None


class Operation(Resource):
    _resource_name = 'operation'

    @property
    def status(self):
        return self.get('status')

    def is_done(self):
        return self.status == OPERATION_DONE

    @property
    def zone_name(self):
        return last_segment(self.get('zone'))

    @property
    def target_link(self):
        return self.get('targetLink')

    @property
    def operation_type(self):
        return self.get('operationType')

    @property
    def http_error(self):
        """(status code, message) of a failed operation, None otherwise."""
        status_code = self.get('httpErrorStatusCode')
        if status_code is None:
            return None
        return int(status_code), self.get('httpErrorMessage')

    @property
    def errors(self):
        error = self.get('error') or {}
        return tuple(error.get('errors', ()))


class Instance(Resource):
    _resource_name = 'instance'

    @property
    def status(self):
        return self.get('status')

    @property
    def zone_name(self):
        return last_segment(self.get('zone'))

    @property
    def machine_type(self):
        return self.get('machineType')

    @property
    def tags(self):
        tags = self.get('tags') or {}
        return tuple(tags.get('items', ()))

    @property
    def metadata(self):
        metadata = self.get('metadata') or {}
        return {item['key']: item.get('value')
                for item in metadata.get('items', ())}

    @property
    def network_interfaces(self):
        return tuple(self.get('networkInterfaces', ()))

    @property
    def slash_encoded_id(self):
        return SlashEncodedIds.from_two_ids(self.zone_name,
                                            self.name).slash_encoded


class Image(Resource):
    _resource_name = 'image'

    @property
    def source_type(self):
        return self.get('sourceType')

    @property
    def deprecated(self):
        return self.get('deprecated')


class MachineType(Resource):
    _resource_name = 'machine_type'

    @property
    def zone_name(self):
        return self.get('zone')

    @property
    def guest_cpus(self):
        return self.get('guestCpus')

    @property
    def memory_mb(self):
        return self.get('memoryMb')


class Zone(Resource):
    _resource_name = 'zone'

    @property
    def status(self):
        return self.get('status')

    @property
    def region_name(self):
        return last_segment(self.get('region'))


class Region(Resource):
    _resource_name = 'region'

    def __init__(self, dct):
        if not dct.get('status'):
            raise ex.InvalidDataException(
                _("Status of region %s is not set") % dct.get('name'))
        super(Region, self).__init__(dct)

    @property
    def status(self):
        return self.get('status')

    @property
    def available_zones(self):
        return tuple(last_segment(z)
                     for z in self.get('zones') or ())


class SerialPortOutput(Resource):
    _resource_name = 'serial_port_output'


class SlashEncodedIds(object):
    """Two ids joined with a slash, e.g. '<zone>/<instance name>'."""

    def __init__(self, first_id, second_id):
        self.first_id = first_id
        self.second_id = second_id

    @classmethod
    def from_slash_encoded(cls, value):
        parts = (value or '').split('/')
        if len(parts) != 2 or not all(parts):
            raise ex.InvalidDataException(
                _("Id '%s' should be in the format '<first>/<second>'")
                % value)
        return cls(parts[0], parts[1])

    @classmethod
    def from_two_ids(cls, first_id, second_id):
        return cls(first_id, second_id)

    @property
    def slash_encoded(self):
        return '%s/%s' % (self.first_id, self.second_id)

    def __eq__(self, other):
        return (isinstance(other, SlashEncodedIds) and
                self.slash_encoded == other.slash_encoded)

    def __hash__(self):
        return hash(self.slash_encoded)

    def __repr__(self):
        return 'SlashEncodedIds(%s)' % self.slash_encoded
