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

from oslo_utils import uuidutils

from gcecompute.i18n import _


class GCEComputeException(Exception):
    """Base Exception for the project

    To correctly use this class, inherit from it and define
    a 'message' and 'code' properties.
    """
    code = "UNKNOWN_EXCEPTION"
    message = _("An unknown exception occurred")

    def __str__(self):
        return self.message

    def __init__(self, message=None, code=None, inject_error_id=True):
        self.uuid = uuidutils.generate_uuid()

        if code:
            self.code = code
        if message:
            self.message = message

        if inject_error_id:
            # Add Error UUID to the message if required
            self.message = (_('%(message)s\nError ID: %(id)s')
                            % {'message': self.message, 'id': self.uuid})

        super(GCEComputeException, self).__init__(
            '%s: %s' % (self.code, self.message))


class NotFoundException(GCEComputeException):
    code = "NOT_FOUND"
    message_template = _("Object '%s' is not found")

    # It could be a various property of object which was not found
    def __init__(self, value, message_template=None):
        self.value = value
        if message_template:
            formatted_message = message_template % value
        else:
            formatted_message = self.message_template % value

        super(NotFoundException, self).__init__(formatted_message)


class NotFoundAfterTimeout(GCEComputeException):
    code = "NOT_FOUND_AFTER_TIMEOUT"
    message_template = _("Resource '%(name)s' was not visible after "
                         "%(timeout)s second(s)")

    def __init__(self, name, timeout):
        self.name = name
        self.timeout = timeout
        formatted_message = self.message_template % {'name': name,
                                                     'timeout': timeout}

        super(NotFoundAfterTimeout, self).__init__(formatted_message)


class InvalidDataException(GCEComputeException):
    """General exception to use for invalid data

    A more useful message should be passed to __init__ which
    tells the user more about why the data is invalid.
    """
    code = "INVALID_DATA"
    message = _("Data is invalid")


class ConfigurationError(GCEComputeException):
    code = "CONFIGURATION_ERROR"
    message = _("The configuration has failed")


class IncorrectStateError(GCEComputeException):
    message = _("The object is in an incorrect state")
    code = "INCORRECT_STATE_ERROR"


class FrozenClassError(GCEComputeException):
    code = "FROZEN_CLASS_ERROR"
    message_template = _("Class %s is immutable!")

    def __init__(self, instance):
        formatted_message = self.message_template % type(instance).__name__

        super(FrozenClassError, self).__init__(formatted_message)


class UnsupportedOperation(GCEComputeException):
    code = "UNSUPPORTED_OPERATION"
    message_template = _("Operation '%s' is not supported by the provider")

    def __init__(self, operation):
        formatted_message = self.message_template % operation

        super(UnsupportedOperation, self).__init__(formatted_message)


class HttpError(GCEComputeException):
    code = "HTTP_ERROR"
    message_template = _("Request %(method)s %(url)s failed with status "
                         "%(status)s: %(reason)s")

    def __init__(self, status_code, reason, method=None, url=None):
        self.status_code = status_code
        self.reason = reason
        formatted_message = self.message_template % {
            'method': method, 'url': url, 'status': status_code,
            'reason': reason}

        super(HttpError, self).__init__(formatted_message)


class MaxRetriesExceeded(GCEComputeException):
    code = "MAX_RETRIES_EXCEEDED"
    message_template = _("Operation %(operation)s wasn't executed correctly "
                         "after %(attempts)d attempts")

    def __init__(self, attempts, operation):
        formatted_message = self.message_template % {'operation': operation,
                                                     'attempts': attempts}

        super(MaxRetriesExceeded, self).__init__(formatted_message)


class OperationTimeout(GCEComputeException):
    code = "TIMEOUT"
    message_template = _("'%(operation)s' timed out after %(timeout)s "
                         "second(s)")

    def __init__(self, timeout, operation=None, op_name=None):
        self.timeout = timeout
        self.operation = operation
        if op_name:
            op_name = _("Operation with name '%s'") % op_name
        else:
            op_name = _("Operation")
        formatted_message = self.message_template % {
            'operation': op_name, 'timeout': timeout}

        if operation is not None:
            desc = _("%(message)s, last observed status: %(status)s")
            formatted_message = desc % {
                'message': formatted_message,
                'status': operation.get('status')}

        super(OperationTimeout, self).__init__(formatted_message)


class RemoteOperationError(GCEComputeException):
    code = "REMOTE_OPERATION_FAILED"
    message_template = _("Operation failed. Http Error Code: %(status)s "
                         "HttpError: %(message)s")

    def __init__(self, status_code, message, operation=None):
        self.status_code = status_code
        self.remote_message = message
        self.operation = operation
        formatted_message = self.message_template % {'status': status_code,
                                                     'message': message}

        super(RemoteOperationError, self).__init__(formatted_message)
