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
from gcecompute.client import templates
from gcecompute import resources


class ImageApi(base.ApiBase):
    """Images of a project, stored in its global collection."""

    def _path(self, *parts):
        return self._project_path('global', 'images', *parts)

    @resources.wrap(resources.Image)
    def get(self, image_name):
        """Returns the image, None if it does not exist."""
        return self._get(self._path(image_name))

    @resources.wrap(resources.Operation)
    def delete(self, image_name):
        """Deletes the image, None if it did not exist."""
        return self._delete(self._path(image_name))

    @resources.wrap(resources.Image)
    def list_first_page(self, options=None):
        return self._list_page(self._path(), options=options)

    @resources.wrap(resources.Image)
    def list_at_marker(self, marker, options=None):
        return self._list_page(self._path(), marker=marker, options=options)

    def list(self, options=None):
        return base.PagedIterable(
            self.list_first_page(options),
            lambda marker: self.list_at_marker(marker, options))

    @resources.wrap(resources.Operation)
    def deprecate(self, image_name, deprecate_options=None):
        """Sets the deprecation status, clears it when options are empty."""
        deprecate_options = (deprecate_options or
                             templates.DeprecateOptions())
        return self._post(self._path(image_name, 'deprecate'),
                          data=deprecate_options.to_dict())

    @resources.wrap(resources.Operation)
    def create(self, name, source, preferred_kernel=None, source_type='RAW'):
        """Creates a new image from a raw disk stored at source."""
        data = {'name': name,
                'rawDisk': {'source': source},
                'sourceType': source_type}
        if preferred_kernel:
            data['preferredKernel'] = preferred_kernel
        return self._post(self._path(), data=data)
