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

from gcecompute.client import http_client
from gcecompute.client import images
from gcecompute.client import instances
from gcecompute.client import operations
from gcecompute.client import regions
from gcecompute.client import zones


class ComputeClient(object):
    """Entry point of the compute API binding.

    Every accessor returns the API of one resource collection for a
    project, the project of the current context when omitted.
    """

    def __init__(self, endpoint=None, auth_token=None, session=None):
        self.http = http_client.HttpClient(endpoint=endpoint,
                                           auth_token=auth_token,
                                           session=session)

    def instances(self, project=None):
        return instances.InstanceApi(self.http, project)

    def zone_operations(self, project=None):
        return operations.ZoneOperationApi(self.http, project)

    def images(self, project=None):
        return images.ImageApi(self.http, project)

    def zones(self, project=None):
        return zones.ZoneApi(self.http, project)

    def machine_types(self, project=None):
        return zones.MachineTypeApi(self.http, project)

    def regions(self, project=None):
        return regions.RegionApi(self.http, project)
