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

from oslo_config import cfg
from oslo_log import log as logging

from gcecompute import context
from gcecompute import exceptions as ex
from gcecompute.i18n import _
from gcecompute.utils import types

LOG = logging.getLogger(__name__)

# List of the errors, that can be retried
ERRORS_TO_RETRY = [408, 413, 429, 500, 502, 503, 504]

opts = [
    cfg.IntOpt('retries_number',
               default=5,
               help='Number of times to retry the request to the compute '
                    'API before failing'),
    cfg.IntOpt('retry_after',
               default=10,
               help='Time between the retries to the compute API '
                    '(in seconds).')
]

retries = cfg.OptGroup(name='retries',
                       title='Compute API calls retries')

CONF = cfg.CONF
CONF.register_group(retries)
CONF.register_opts(opts, group=retries)


def execute_with_retries(method, *args, **kwargs):
    attempts = CONF.retries.retries_number + 1
    while attempts > 0:
        try:
            return method(*args, **kwargs)
        except Exception as e:
            error_code = getattr(e, 'status_code', None) or getattr(
                e, 'code', None)
            if error_code in ERRORS_TO_RETRY:
                LOG.warning('Occasional error occurred during "{method}" '
                            'execution: {error_msg} ({error_code}). '
                            'Operation will be retried.'.format(
                                method=method.__name__,
                                error_msg=e,
                                error_code=error_code))
                attempts -= 1
                retry_after = getattr(e, 'retry_after', 0) or 0
                context.sleep(max(retry_after, CONF.retries.retry_after))
            else:
                LOG.debug('Permanent error occurred during "{method}" '
                          'execution: {error_msg}.'.format(
                              method=method.__name__, error_msg=e))
                raise e
    else:
        attempts = CONF.retries.retries_number
        raise ex.MaxRetriesExceeded(attempts, method.__name__)


class ListOptions(object):
    """Filtering and page size of a list call."""

    def __init__(self, filter=None, max_results=None):
        self.filter = filter
        self.max_results = max_results

    def to_params(self):
        params = {}
        if self.filter:
            params['filter'] = self.filter
        if self.max_results is not None:
            params['maxResults'] = self.max_results
        return params


class PagedIterable(object):
    """Iterates over the pages of a list call following page tokens.

    The first page is fetched eagerly, the following ones only when
    iteration reaches them.
    """

    def __init__(self, first_page, fetch_next):
        self._first_page = first_page
        self._fetch_next = fetch_next

    def __iter__(self):
        page = self._first_page
        yield page
        while page.has_next():
            page = self._fetch_next(page.next_page_token)
            yield page

    def concat(self):
        return [item for page in self for item in page]


class ApiBase(object):
    """Access to one resource collection of one project."""

    def __init__(self, http, project=None):
        self._http = http
        self.project = project or context.current_project()
        if not self.project:
            raise ex.ConfigurationError(
                _("Project is not set neither in the request context "
                  "nor in the configuration"))

    def _project_path(self, *parts):
        return '/'.join(('projects', self.project) + parts)

    def _get(self, path, params=None):
        return self._http.execute('GET', path, params=params,
                                  not_found_ok=True)

    def _delete(self, path):
        return self._http.execute('DELETE', path, not_found_ok=True)

    def _post(self, path, data=None, params=None, not_found_ok=False):
        return self._http.execute('POST', path, params=params, data=data,
                                  not_found_ok=not_found_ok)

    def _list_page(self, path, marker=None, options=None):
        params = options.to_params() if options else {}
        if marker:
            params['pageToken'] = marker
        body = self._get(path, params=params)
        if not body:
            return types.ListPage([])
        return types.ListPage(body.get('items', []),
                              body.get('nextPageToken'))
