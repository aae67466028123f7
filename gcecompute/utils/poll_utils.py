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

import collections

from oslo_config import cfg
from oslo_log import log as logging
from oslo_utils import timeutils

from gcecompute import context
from gcecompute import exceptions as ex
from gcecompute.i18n import _

LOG = logging.getLogger(__name__)

DEFAULT_INTERVAL = 2
DEFAULT_TIMEOUT = 600
MIN_INTERVAL = 0.1

timeouts_opts = [
    cfg.FloatOpt('operation_complete_interval',
                 default=DEFAULT_INTERVAL,
                 min=MIN_INTERVAL,
                 help="Interval between two checks of an operation or "
                      "resource status, in seconds"),
    cfg.FloatOpt('operation_complete_timeout',
                 default=DEFAULT_TIMEOUT,
                 min=0,
                 help="Wait for an operation to complete or a resource "
                      "to become visible, in seconds"),
]

timeouts = cfg.OptGroup(name='timeouts',
                        title='Operation polling timeouts')

CONF = cfg.CONF
CONF.register_group(timeouts)
CONF.register_opts(timeouts_opts, group=timeouts)


class WaitConfig(collections.namedtuple('WaitConfig',
                                        ['interval', 'timeout'])):
    """Poll interval and overall timeout, both in seconds."""

    __slots__ = ()

    def __new__(cls, interval, timeout):
        if interval is None or interval <= 0:
            raise ex.InvalidDataException(
                _("Poll interval must be positive, got %s") % interval)
        if timeout is None or timeout < 0:
            raise ex.InvalidDataException(
                _("Poll timeout must not be negative, got %s") % timeout)
        return super(WaitConfig, cls).__new__(cls, interval, timeout)

    @classmethod
    def from_conf(cls):
        return cls(CONF.timeouts.operation_complete_interval,
                   CONF.timeouts.operation_complete_timeout)


def _get_consumed(started_at):
    return timeutils.delta_seconds(started_at, timeutils.utcnow())


def _poll(fetch, is_done, config, initial=None, operation_name=None):
    """Calls fetch until is_done accepts its result or time runs out.

    :param fetch: function taking the previously fetched value (initial
        on the first call) and returning the current one
    :param is_done: predicate applied to every fetched value
    :param config: WaitConfig with the interval and timeout
    :param initial: value handed to the first fetch call
    :param operation_name: name of polling process, used for logging
    :returns: tuple (done, last fetched value)
    """
    start_time = timeutils.utcnow()
    # We shouldn't time out if incorrect timeout specified and status is
    # ok now. In such way we should fetch at least once.
    at_least_once = True
    value = initial

    while at_least_once or _get_consumed(start_time) < config.timeout:
        at_least_once = False
        value = fetch(value)

        if is_done(value):
            operation = "Operation"
            if operation_name:
                operation = "Operation with name {op_name}".format(
                    op_name=operation_name)
            LOG.debug(
                '{operation_desc} was executed successfully in timeout '
                '{timeout}'
                .format(operation_desc=operation, timeout=config.timeout))
            return True, value

        context.sleep(config.interval)
    return False, value


def wait_until_done(operation, fetch_status, config=None):
    """Waits for an asynchronous operation to reach the DONE state.

    The operation passed in is only used as the key of the first fetch,
    its status is never trusted as current.

    :param operation: Operation returned by the submitting call
    :param fetch_status: function taking the last observed Operation and
        returning a freshly fetched one
    :param config: WaitConfig, taken from configuration if omitted
    :returns: the DONE Operation
    :raises OperationTimeout: DONE was not observed before the timeout,
        the exception carries the last observed operation
    :raises RemoteOperationError: the DONE operation reports a failure
    """
    config = config or WaitConfig.from_conf()
    name = operation.get('name')

    def _fetch(previous):
        fetched = fetch_status(previous)
        if fetched is None:
            raise ex.NotFoundException(
                name, _("Operation '%s' disappeared while waiting for it"))
        return fetched

    done, operation = _poll(_fetch, lambda op: op.is_done(), config,
                            initial=operation, operation_name=name)
    if not done:
        raise ex.OperationTimeout(config.timeout, operation, name)

    http_error = operation.http_error
    if http_error:
        status_code, message = http_error
        LOG.warning("Operation {name} failed with {code}: {message}".format(
            name=name, code=status_code, message=message))
        raise ex.RemoteOperationError(status_code, message, operation)

    return operation


def wait_until_visible(name, fetch_resource, config=None):
    """Re-fetches a resource by name until the API returns it.

    :raises NotFoundAfterTimeout: the resource was never returned
    """
    config = config or WaitConfig.from_conf()

    done, resource = _poll(lambda previous: fetch_resource(name),
                           lambda res: res is not None, config,
                           operation_name=name)
    if not done:
        raise ex.NotFoundAfterTimeout(name, config.timeout)
    return resource
