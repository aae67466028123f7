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

import datetime
from unittest import mock

from oslo_utils import timeutils
from oslotest import base

from gcecompute import context
from gcecompute import main


class GCEComputeTestCase(base.BaseTestCase):

    def setUp(self):
        super(GCEComputeTestCase, self).setUp()
        self.setup_context()

    def setup_context(self, project_id="test-project",
                      auth_token="test_auth_token", user_id="test_user",
                      **kwargs):
        self.addCleanup(context.set_ctx,
                        context.ctx() if context.has_ctx() else None)

        context.set_ctx(context.Context(
            project_id=project_id, auth_token=auth_token, user_id=user_id,
            **kwargs))

    def override_config(self, name, override, group=None):
        main.CONF.set_override(name, override, group)
        self.addCleanup(main.CONF.clear_override, name, group)

    def freeze_time(self):
        """Stops the clock, context.sleep advances it instead of sleeping.

        :returns: the mock standing in for context.sleep
        """
        timeutils.set_time_override(datetime.datetime(2015, 1, 1))
        self.addCleanup(timeutils.clear_time_override)

        patcher = mock.patch('gcecompute.context.sleep',
                             side_effect=timeutils.advance_time_seconds)
        self.addCleanup(patcher.stop)
        return patcher.start()
