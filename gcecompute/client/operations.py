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


class ZoneOperationApi(base.ApiBase):
    """Asynchronous operations acting on zonal resources."""

    def _path(self, zone, *parts):
        return self._project_path('zones', zone, 'operations', *parts)

    @resources.wrap(resources.Operation)
    def get_in_zone(self, zone, operation_name):
        """Returns the operation, None if it does not exist."""
        return self._get(self._path(zone, operation_name))

    def delete_in_zone(self, zone, operation_name):
        self._delete(self._path(zone, operation_name))

    @resources.wrap(resources.Operation)
    def list_first_page_in_zone(self, zone, options=None):
        return self._list_page(self._path(zone), options=options)

    @resources.wrap(resources.Operation)
    def list_at_marker_in_zone(self, zone, marker, options=None):
        return self._list_page(self._path(zone), marker=marker,
                               options=options)

    def list_in_zone(self, zone, options=None):
        return base.PagedIterable(
            self.list_first_page_in_zone(zone, options),
            lambda marker: self.list_at_marker_in_zone(zone, marker,
                                                       options))

    def refresh(self, operation):
        """Fetches the current state of an operation."""
        return self.get_in_zone(operation.zone_name, operation.name)
