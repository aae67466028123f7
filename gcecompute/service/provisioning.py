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

from oslo_log import log as logging

from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute.utils import poll_utils

LOG = logging.getLogger(__name__)

STATE_NEW = 'NEW'
STATE_SUBMITTED = 'SUBMITTED'
STATE_WAITING_OPERATION = 'WAITING_OPERATION'
STATE_WAITING_VISIBILITY = 'WAITING_VISIBILITY'
STATE_READY = 'READY'
STATE_FAILED = 'FAILED'


class ProvisioningRequest(object):
    """Creation of a single node, from submission until it is readable.

    A request moves through SUBMITTED, WAITING_OPERATION (only when the
    caller blocks on the create operation) and WAITING_VISIBILITY to
    READY. A timeout, a failed operation or any error of the fetch
    calls in either wait moves it to FAILED and the error is re-raised
    to the caller.
    """

    def __init__(self, name, submit, fetch_operation, fetch_resource,
                 config=None, block_until_done=True):
        self.name = name
        self.state = STATE_NEW
        self.operation = None
        self.resource = None
        self._submit = submit
        self._fetch_operation = fetch_operation
        self._fetch_resource = fetch_resource
        self._config = config or poll_utils.WaitConfig.from_conf()
        self._block_until_done = block_until_done

    def _set_state(self, state):
        LOG.debug("Provisioning of {name}: {old} -> {new}".format(
            name=self.name, old=self.state, new=state))
        self.state = state

    def run(self):
        if self.state != STATE_NEW:
            raise ex.IncorrectStateError(
                _("Provisioning request for %(name)s is already %(state)s")
                % {'name': self.name, 'state': self.state})

        try:
            self.operation = self._submit()
            self._set_state(STATE_SUBMITTED)

            if self._block_until_done:
                self._set_state(STATE_WAITING_OPERATION)
                self.operation = poll_utils.wait_until_done(
                    self.operation, self._fetch_operation, self._config)

            # the API does not always list a just created resource
            self._set_state(STATE_WAITING_VISIBILITY)
            self.resource = poll_utils.wait_until_visible(
                self.name, self._fetch_resource, self._config)
        except Exception:
            self._set_state(STATE_FAILED)
            raise

        self._set_state(STATE_READY)
        return self.resource


def provision_node(name, submit, fetch_operation, fetch_resource,
                   config=None, block_until_done=True):
    request = ProvisioningRequest(name, submit, fetch_operation,
                                  fetch_resource, config=config,
                                  block_until_done=block_until_done)
    return request.run()
