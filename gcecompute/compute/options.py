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
import copy


class LoginCredentials(collections.namedtuple(
        'LoginCredentials',
        ['user', 'password', 'private_key', 'authenticate_sudo'])):
    """Credentials to log into a node, immutable."""

    __slots__ = ()

    def __new__(cls, user=None, password=None, private_key=None,
                authenticate_sudo=False):
        return super(LoginCredentials, cls).__new__(
            cls, user, password, private_key, authenticate_sudo)

    def replace(self, **kwargs):
        return self._replace(**kwargs)

    def __repr__(self):
        # keep secrets out of logs
        return ('LoginCredentials(user=%r, password=%s, private_key=%s, '
                'authenticate_sudo=%r)' % (
                    self.user, '***' if self.password else None,
                    '***' if self.private_key else None,
                    self.authenticate_sudo))


NodeAndInitialCredentials = collections.namedtuple(
    'NodeAndInitialCredentials', ['node', 'node_id', 'credentials'])


class TemplateOptions(object):
    """Provider specific settings of a node to create."""

    def __init__(self, network=None, enable_nat=True, tags=(),
                 service_accounts=(), user_metadata=None, public_key=None,
                 login_user=None, login_password=None,
                 login_private_key=None, authenticate_sudo=None,
                 block_until_running=True):
        self.network = network
        self.enable_nat = enable_nat
        self.tags = list(tags)
        self.service_accounts = [dict(sa) for sa in service_accounts]
        self.user_metadata = dict(user_metadata or {})
        self.public_key = public_key
        self.login_user = login_user
        self.login_password = login_password
        self.login_private_key = login_private_key
        self.authenticate_sudo = authenticate_sudo
        self.block_until_running = block_until_running
        self.login_credentials = None

    def clone(self):
        return copy.deepcopy(self)

    def authorize_public_key(self, public_key):
        self.public_key = public_key
        return self

    def override_login_credentials(self, credentials):
        self.login_credentials = credentials
        return self

    def has_login_private_key_option(self):
        return self.login_private_key is not None

    def has_login_password_option(self):
        return self.login_password is not None


class Template(object):
    """What to create and where.

    :param hardware: machine type resource (anything with a self link)
    :param image: image resource (anything with a self link)
    :param location: name of the zone to create the node in
    :param options: TemplateOptions
    :param image_credentials: default LoginCredentials of the image, the
        private key field holding '<public key>:<private key>'
    """

    def __init__(self, hardware, image, location, options=None,
                 image_credentials=None):
        self.hardware = hardware
        self.image = image
        self.location = location
        self.options = options or TemplateOptions()
        self.image_credentials = image_credentials
