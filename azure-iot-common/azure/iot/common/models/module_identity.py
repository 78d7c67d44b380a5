# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains classes representing the identity of a module registered on IoT Hub,
along with helpers for building them.
"""
from msrest.serialization import Model
from azure.iot.common import constant


def ensure_quoted(etag):
    """Quote an etag for use in an If-Match header.

    Values that are not strings, already quoted, or weak (W/"...") are returned unchanged.
    """
    if not isinstance(etag, str) or (len(etag) > 1 and etag[0] == '"' and etag[-1] == '"'):
        return etag
    if etag.startswith('W/"'):
        return etag
    return '"' + etag + '"'


class SymmetricKey(Model):
    """The primary and secondary keys used for SAS based authentication.

    :param primary_key: The base64 encoded primary key.
    :type primary_key: str
    :param secondary_key: The base64 encoded secondary key.
    :type secondary_key: str
    """

    _attribute_map = {
        "primary_key": {"key": "primaryKey", "type": "str"},
        "secondary_key": {"key": "secondaryKey", "type": "str"},
    }

    def __init__(self, **kwargs):
        super(SymmetricKey, self).__init__(**kwargs)
        self.primary_key = kwargs.get("primary_key", "")
        self.secondary_key = kwargs.get("secondary_key", "")


class X509Thumbprint(Model):
    """The primary and secondary thumbprints of an X509 certificate.

    :param primary_thumbprint: The hex encoded primary thumbprint.
    :type primary_thumbprint: str
    :param secondary_thumbprint: The hex encoded secondary thumbprint.
    :type secondary_thumbprint: str
    """

    _attribute_map = {
        "primary_thumbprint": {"key": "primaryThumbprint", "type": "str"},
        "secondary_thumbprint": {"key": "secondaryThumbprint", "type": "str"},
    }

    def __init__(self, **kwargs):
        super(X509Thumbprint, self).__init__(**kwargs)
        self.primary_thumbprint = kwargs.get("primary_thumbprint", "")
        self.secondary_thumbprint = kwargs.get("secondary_thumbprint", "")


class AuthenticationMechanism(Model):
    """The authentication mechanism used by a module when connecting to IoT Hub or IoT Edge.

    Both credential sub-records are always present. The one not named by `type` is left empty.

    :param type: The type of authentication used. Possible values include: 'sas',
        'selfSigned', 'certificateAuthority', 'none'
    :type type: str
    :param symmetric_key: The primary and secondary keys used for SAS based authentication.
    :type symmetric_key: :class:`SymmetricKey`
    :param x509_thumbprint: The primary and secondary x509 thumbprints used for x509 based
        authentication.
    :type x509_thumbprint: :class:`X509Thumbprint`
    """

    _attribute_map = {
        "type": {"key": "type", "type": "str"},
        "symmetric_key": {"key": "symmetricKey", "type": "SymmetricKey"},
        "x509_thumbprint": {"key": "x509Thumbprint", "type": "X509Thumbprint"},
    }

    def __init__(self, **kwargs):
        super(AuthenticationMechanism, self).__init__(**kwargs)
        self.type = kwargs.get("type", "")
        self.symmetric_key = kwargs.get("symmetric_key", None)
        if self.symmetric_key is None:
            self.symmetric_key = SymmetricKey()
        self.x509_thumbprint = kwargs.get("x509_thumbprint", None)
        if self.x509_thumbprint is None:
            self.x509_thumbprint = X509Thumbprint()

    def is_sas(self):
        return self.type == constant.AUTH_TYPE_SAS

    def is_x509(self):
        return self.type == constant.AUTH_TYPE_SELF_SIGNED

    def is_certificate_authority(self):
        return self.type == constant.AUTH_TYPE_CERTIFICATE_AUTHORITY


class ModuleIdentity(Model):
    """The identity of a module registered under a device on IoT Hub.

    The operational metadata and versioning fields are maintained by IoT Hub. Timestamps are
    kept as the strings IoT Hub emits and are not parsed.

    :param module_id: The unique identifier of the module.
    :type module_id: str
    :param device_id: The unique identifier of the device.
    :type device_id: str
    :param authentication: The authentication mechanism used by the module when connecting
        to the service and edge hub.
    :type authentication: :class:`AuthenticationMechanism`
    :param managed_by: Identifies who manages this module. For instance, this value is
        "IotEdge" if the edge runtime owns this module.
    :type managed_by: str
    :param last_activity_time: The date and time the device last connected, received, or
        sent a message.
    :type last_activity_time: str
    :param cloud_to_device_message_count: The number of cloud-to-module messages currently
        queued to be sent to the module.
    :type cloud_to_device_message_count: int
    :param connection_state: The connection state of the device.
    :type connection_state: str
    :param connection_state_updated_time: The date and time the connection state was last updated.
    :type connection_state_updated_time: str
    :param etag: The string representing a weak ETag for the module identity, as per RFC7232.
    :type etag: str
    :param generation_id: The IoT Hub generated, case-sensitive string up to 128 characters
        long. This value is used to distinguish modules with the same moduleId, when they have
        been deleted and re-created.
    :type generation_id: str
    """

    _validation = {
        "cloud_to_device_message_count": {"minimum": 0},
        "generation_id": {"max_length": constant.GENERATION_ID_MAX_LENGTH},
    }

    _attribute_map = {
        "module_id": {"key": "moduleId", "type": "str"},
        "device_id": {"key": "deviceId", "type": "str"},
        "authentication": {"key": "authentication", "type": "AuthenticationMechanism"},
        "managed_by": {"key": "managedBy", "type": "str"},
        "last_activity_time": {"key": "lastActivityTime", "type": "str"},
        "cloud_to_device_message_count": {"key": "cloudToDeviceMessageCount", "type": "int"},
        "connection_state": {"key": "connectionState", "type": "str"},
        "connection_state_updated_time": {"key": "connectionStateUpdatedTime", "type": "str"},
        "etag": {"key": "etag", "type": "str"},
        "generation_id": {"key": "generationId", "type": "str"},
    }

    def __init__(self, **kwargs):
        super(ModuleIdentity, self).__init__(**kwargs)
        self.module_id = kwargs.get("module_id", "")
        self.device_id = kwargs.get("device_id", "")
        self.authentication = kwargs.get("authentication", None)
        if self.authentication is None:
            self.authentication = AuthenticationMechanism()
        self.managed_by = kwargs.get("managed_by", "")
        self.last_activity_time = kwargs.get("last_activity_time", "")
        self.cloud_to_device_message_count = kwargs.get("cloud_to_device_message_count", 0)
        self.connection_state = kwargs.get("connection_state", "")
        self.connection_state_updated_time = kwargs.get("connection_state_updated_time", "")
        self.etag = kwargs.get("etag", "")
        self.generation_id = kwargs.get("generation_id", "")

    @property
    def if_match(self):
        """The value of the If-Match header for an update carrying this identity's etag"""
        if not self.etag:
            return "*"
        return ensure_quoted(self.etag)


def create_module_with_sas(device_id, module_id, managed_by, primary_key, secondary_key):
    """Creates a module identity using SAS authentication.

    :param str device_id: The name (Id) of the device.
    :param str module_id: The name (Id) of the module.
    :param str managed_by: The name of the manager device (edge).
    :param str primary_key: Primary authentication key.
    :param str secondary_key: Secondary authentication key.

    :returns: ModuleIdentity ready to be sent to IoT Hub.
    """
    symmetric_key = SymmetricKey(primary_key=primary_key, secondary_key=secondary_key)

    kwargs = {
        "device_id": device_id,
        "module_id": module_id,
        "managed_by": managed_by,
        "authentication": AuthenticationMechanism(
            type=constant.AUTH_TYPE_SAS, symmetric_key=symmetric_key
        ),
    }
    return ModuleIdentity(**kwargs)


def create_module_with_x509(
    device_id, module_id, managed_by, primary_thumbprint, secondary_thumbprint
):
    """Creates a module identity using X509 authentication.

    :param str device_id: The name (Id) of the device.
    :param str module_id: The name (Id) of the module.
    :param str managed_by: The name of the manager device (edge).
    :param str primary_thumbprint: Primary X509 thumbprint.
    :param str secondary_thumbprint: Secondary X509 thumbprint.

    :returns: ModuleIdentity ready to be sent to IoT Hub.
    """
    x509_thumbprint = X509Thumbprint(
        primary_thumbprint=primary_thumbprint, secondary_thumbprint=secondary_thumbprint
    )

    kwargs = {
        "device_id": device_id,
        "module_id": module_id,
        "managed_by": managed_by,
        "authentication": AuthenticationMechanism(
            type=constant.AUTH_TYPE_SELF_SIGNED, x509_thumbprint=x509_thumbprint
        ),
    }
    return ModuleIdentity(**kwargs)


def create_module_with_certificate_authority(device_id, module_id, managed_by):
    """Creates a module identity using certificate authority.

    :param str device_id: The name (Id) of the device.
    :param str module_id: The name (Id) of the module.
    :param str managed_by: The name of the manager device (edge).

    :returns: ModuleIdentity ready to be sent to IoT Hub.
    """
    kwargs = {
        "device_id": device_id,
        "module_id": module_id,
        "managed_by": managed_by,
        "authentication": AuthenticationMechanism(type=constant.AUTH_TYPE_CERTIFICATE_AUTHORITY),
    }
    return ModuleIdentity(**kwargs)


def update_module_with_sas(device_id, module_id, managed_by, etag, primary_key, secondary_key):
    """Creates a module identity update using SAS authentication.

    :param str etag: The etag of the module identity last read from IoT Hub.

    See create_module_with_sas for the remaining parameters.
    """
    module = create_module_with_sas(device_id, module_id, managed_by, primary_key, secondary_key)
    module.etag = etag
    return module


def update_module_with_x509(
    device_id, module_id, managed_by, etag, primary_thumbprint, secondary_thumbprint
):
    """Creates a module identity update using X509 authentication.

    :param str etag: The etag of the module identity last read from IoT Hub.

    See create_module_with_x509 for the remaining parameters.
    """
    module = create_module_with_x509(
        device_id, module_id, managed_by, primary_thumbprint, secondary_thumbprint
    )
    module.etag = etag
    return module


def update_module_with_certificate_authority(device_id, module_id, managed_by, etag):
    """Creates a module identity update using certificate authority authentication.

    :param str etag: The etag of the module identity last read from IoT Hub.

    See create_module_with_certificate_authority for the remaining parameters.
    """
    module = create_module_with_certificate_authority(device_id, module_id, managed_by)
    module.etag = etag
    return module
