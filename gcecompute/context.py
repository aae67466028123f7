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

import threading
import time

from oslo_config import cfg
from oslo_context import context
from oslo_log import log as logging

from gcecompute import exceptions as ex
from gcecompute.i18n import _


opts = [
    cfg.StrOpt('default_project',
               help='Project that owns the instances, used when the '
                    'request context does not carry one.'),
    cfg.StrOpt('auth_token',
               secret=True,
               help='OAuth2 bearer token used when the request context '
                    'does not carry one.'),
]

CONF = cfg.CONF
CONF.register_opts(opts)
LOG = logging.getLogger(__name__)


class Context(context.RequestContext):
    def __init__(self,
                 project_id=None,
                 auth_token=None,
                 user_id=None,
                 request_id=None,
                 overwrite=True,
                 **kwargs):
        if kwargs:
            LOG.warning('Arguments dropped when creating context: '
                        '{args}'.format(args=kwargs))

        super(Context, self).__init__(auth_token=auth_token,
                                      user_id=user_id,
                                      project_id=project_id,
                                      request_id=request_id,
                                      overwrite=overwrite)

    def clone(self):
        return Context(
            self.project_id,
            self.auth_token,
            self.user_id,
            self.request_id,
            overwrite=False)

    def is_auth_capable(self):
        return bool(self.auth_token and self.project_id)


_CTX_STORE = threading.local()
_CTX_KEY = 'current_ctx'


def has_ctx():
    return hasattr(_CTX_STORE, _CTX_KEY)


def ctx():
    if not has_ctx():
        raise ex.IncorrectStateError(_("Context isn't available here"))
    return getattr(_CTX_STORE, _CTX_KEY)


def current():
    return ctx()


def set_ctx(new_ctx):
    if not new_ctx and has_ctx():
        delattr(_CTX_STORE, _CTX_KEY)

    if new_ctx:
        setattr(_CTX_STORE, _CTX_KEY, new_ctx)


def current_project():
    """Project of the current context, falling back to configuration."""
    if has_ctx() and current().project_id:
        return current().project_id
    return CONF.default_project


def current_auth_token():
    if has_ctx() and current().auth_token:
        return current().auth_token
    return CONF.auth_token


def sleep(seconds=0):
    time.sleep(seconds)
