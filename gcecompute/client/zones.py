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


class ZoneApi(base.ApiBase):
    def _path(self, *parts):
        return self._project_path('zones', *parts)

    @resources.wrap(resources.Zone)
    def get(self, zone_name):
        return self._get(self._path(zone_name))

    @resources.wrap(resources.Zone)
    def list_first_page(self, options=None):
        return self._list_page(self._path(), options=options)

    @resources.wrap(resources.Zone)
    def list_at_marker(self, marker, options=None):
        return self._list_page(self._path(), marker=marker, options=options)

    def list(self, options=None):
        return base.PagedIterable(
            self.list_first_page(options),
            lambda marker: self.list_at_marker(marker, options))


class MachineTypeApi(base.ApiBase):
    def _path(self, zone, *parts):
        return self._project_path('zones', zone, 'machineTypes', *parts)

    @resources.wrap(resources.MachineType)
    def get_in_zone(self, zone, machine_type_name):
        return self._get(self._path(zone, machine_type_name))

    @resources.wrap(resources.MachineType)
    def list_first_page_in_zone(self, zone, options=None):
        return self._list_page(self._path(zone), options=options)

    @resources.wrap(resources.MachineType)
    def list_at_marker_in_zone(self, zone, marker, options=None):
        return self._list_page(self._path(zone), marker=marker,
                               options=options)

    def list_in_zone(self, zone, options=None):
        return base.PagedIterable(
            self.list_first_page_in_zone(zone, options),
            lambda marker: self.list_at_marker_in_zone(zone, marker,
                                                       options))
