# Copyright (c) 2014 Intel Corporation.
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

import posixpath

from oslo_config import cfg
from oslo_log import log as logging
from oslo_serialization import jsonutils
import requests

from gcecompute.client import base
from gcecompute import context
from gcecompute import exceptions as ex

LOG = logging.getLogger(__name__)

DEFAULT_ENDPOINT = 'https://www.googleapis.com/compute/v1beta15'

# Only these are resubmitted on transient errors
RETRIED_METHODS = ('GET', 'DELETE')

opts = [
    cfg.URIOpt('endpoint',
               default=DEFAULT_ENDPOINT,
               help='Base URL of the compute API.'),
    cfg.BoolOpt('api_insecure',
                default=False,
                help='Allow to perform insecure SSL requests to the '
                     'compute API.'),
    cfg.StrOpt('ca_file',
               help='Location of ca certificates file to use for compute '
                    'API requests.'),
    cfg.IntOpt('request_timeout',
               default=60,
               help='Timeout of a single compute API request, in seconds.'),
]

compute_group = cfg.OptGroup(name='compute',
                             title='Compute API client options')

CONF = cfg.CONF
CONF.register_group(compute_group)
CONF.register_opts(opts, group=compute_group)


def _make_session():
    session = requests.Session()
    if CONF.compute.api_insecure:
        session.verify = False
    else:
        session.verify = CONF.compute.ca_file or True
    return session


class HttpClient(object):
    """Basic HTTP client tailored for the compute REST API."""

    def __init__(self, endpoint=None, auth_token=None, session=None):
        """Init Method

        :param endpoint: The base url to the API, taken from the
                         configuration if omitted.
        :param auth_token: OAuth2 bearer token. When omitted the token of
                           the current context is used on every request.
        :param session: requests.Session to send the requests with.
        """
        self._endpoint = (endpoint or CONF.compute.endpoint).rstrip('/')
        self._auth_token = auth_token
        self._session = session or _make_session()

    @property
    def endpoint(self):
        return self._endpoint

    def url_for(self, path):
        return self._endpoint + posixpath.normpath('/' + path.lstrip('/'))

    def _get_headers(self, with_body):
        headers = {'Accept': 'application/json'}
        token = self._auth_token or context.current_auth_token()
        if token:
            headers['Authorization'] = 'Bearer %s' % token
        if with_body:
            headers['Content-Type'] = 'application/json'
        return headers

    def execute(self, http_method, path, params=None, data=None,
                not_found_ok=False):
        """Submit an HTTP request

        :param http_method: GET, POST, PUT, DELETE
        :param path: The path of the resource, relative to the endpoint.
        :param params: Key-value query parameters.
        :param data: Object serialized to JSON as the request body.
        :param not_found_ok: Return None instead of raising on 404.

        :return: The decoded JSON body, None when there is no body.
        """
        url = self.url_for(path)
        body = jsonutils.dumps(data) if data is not None else None
        headers = self._get_headers(body is not None)

        LOG.debug("Method: {method}, URL: {url}".format(method=http_method,
                                                        url=url))
        if http_method not in RETRIED_METHODS:
            return self._request(http_method, url, params, body, headers,
                                 not_found_ok)
        return base.execute_with_retries(
            self._request, http_method, url, params, body, headers,
            not_found_ok)

    def _request(self, http_method, url, params, body, headers,
                 not_found_ok):
        try:
            resp = self._session.request(
                http_method, url, params=params, data=body, headers=headers,
                timeout=CONF.compute.request_timeout)
        except requests.RequestException as e:
            raise ex.HttpError(None, str(e), http_method, url)

        if resp.status_code == 404 and not_found_ok:
            LOG.debug("{method} {url} was not found".format(
                method=http_method, url=url))
            return None

        if not resp.ok:
            error = ex.HttpError(resp.status_code, self._error_message(resp),
                                 http_method, url)
            retry_after = resp.headers.get('Retry-After')
            if retry_after and retry_after.isdigit():
                error.retry_after = int(retry_after)
            raise error

        if not resp.text:
            return None
        return jsonutils.loads(resp.text)

    @staticmethod
    def _error_message(resp):
        message = resp.text or resp.reason
        try:
            json_body = jsonutils.loads(resp.text)
            message = json_body['error']['message']
        except (ValueError, KeyError, TypeError):
            pass    # Ignore json parsing error
        return message
