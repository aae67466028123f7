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

from gcecompute.client import base
from gcecompute import resources


class InstanceApi(base.ApiBase):
    """Virtual machine instances of a project, grouped by zone."""

    def _path(self, zone, *parts):
        return self._project_path('zones', zone, 'instances', *parts)

    def machine_type_url(self, zone, machine_type):
        """Expands '<zone>/<type>' or a bare type name into a full URL."""
        if machine_type.startswith(('http://', 'https://')):
            return machine_type
        if '/' in machine_type:
            zone, machine_type = machine_type.split('/', 1)
        return self._http.url_for(self._project_path(
            'zones', zone, 'machineTypes', machine_type))

    @resources.wrap(resources.Instance)
    def get_in_zone(self, zone, instance_name):
        """Returns the instance, None if it does not exist."""
        return self._get(self._path(zone, instance_name))

    @resources.wrap(resources.Operation)
    def create_in_zone(self, zone, instance_name, template):
        """Submits the creation of an instance.

        :param template: InstanceTemplate describing the instance
        :returns: the zone Operation tracking the creation
        """
        data = template.to_dict(
            instance_name, self.machine_type_url(zone, template.machine_type))
        return self._post(self._path(zone), data=data)

    @resources.wrap(resources.Operation)
    def delete_in_zone(self, zone, instance_name):
        """Deletes the instance, None if it did not exist."""
        return self._delete(self._path(zone, instance_name))

    @resources.wrap(resources.Operation)
    def reset_in_zone(self, zone, instance_name):
        """Performs a hard reset, None if the instance does not exist."""
        return self._post(self._path(zone, instance_name, 'reset'),
                          not_found_ok=True)

    @resources.wrap(resources.Instance)
    def list_first_page_in_zone(self, zone, options=None):
        return self._list_page(self._path(zone), options=options)

    @resources.wrap(resources.Instance)
    def list_at_marker_in_zone(self, zone, marker, options=None):
        return self._list_page(self._path(zone), marker=marker,
                               options=options)

    def list_in_zone(self, zone, options=None):
        return base.PagedIterable(
            self.list_first_page_in_zone(zone, options),
            lambda marker: self.list_at_marker_in_zone(zone, marker,
                                                       options))

    @resources.wrap(resources.SerialPortOutput)
    def get_serial_port_output_in_zone(self, zone, instance_name):
        return self._get(self._path(zone, instance_name, 'serialPort'))

    @resources.wrap(resources.Operation)
    def attach_disk_in_zone(self, zone, instance_name, attach_disk_options):
        return self._post(self._path(zone, instance_name, 'attachDisk'),
                          data=attach_disk_options.to_dict())

    @resources.wrap(resources.Operation)
    def detach_disk_in_zone(self, zone, instance_name, device_name):
        return self._post(self._path(zone, instance_name, 'detachDisk'),
                          params={'deviceName': device_name})
