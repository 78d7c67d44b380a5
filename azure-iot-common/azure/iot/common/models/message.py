# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains classes representing messages that are sent to or received from IoT Hub.
"""
import datetime
import sys
from typing import Optional
from typing_extensions import Self
from msrest.serialization import Model
from azure.iot.common import constant
from azure.iot.common.custom_typing import MessageProperties


def as_utc(value):
    """Return the datetime as an aware UTC datetime. Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def is_zero_value(value):
    """Return True if the value is absent or empty, i.e. has no representation on the wire"""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, dict)):
        return len(value) == 0
    return False


class ConnectionAuthMethod(Model):
    """Describes how the sender of a device-to-cloud message authenticated with IoT Hub.

    Set by IoT Hub on delivery. Consumers should treat it as read-only.

    :param scope: The scope of the authentication (e.g. 'device' or 'hub')
    :type scope: str
    :param type: The authentication type (e.g. 'sas', 'x509')
    :type type: str
    :param issuer: The issuer of the credential
    :type issuer: str
    """

    _attribute_map = {
        "scope": {"key": "scope", "type": "str"},
        "type": {"key": "type", "type": "str"},
        "issuer": {"key": "issuer", "type": "str"},
    }

    def __init__(self, **kwargs):
        super(ConnectionAuthMethod, self).__init__(**kwargs)
        self.scope = kwargs.get("scope", "")
        self.type = kwargs.get("type", "")
        self.issuer = kwargs.get("issuer", "")


class Message(Model):
    """Represents a message to or from IoT Hub

    The same envelope is used for device-to-cloud and cloud-to-device messages. Fields that
    are absent or empty are left out of the wire form.

    :ivar payload: The bytes that constitute the payload
    :ivar properties: Dictionary of custom message properties. Keys and values are strings.
    :ivar message_id: A user-settable identifier for the message used for request-reply patterns.
    :ivar to: A destination specified in cloud-to-device messages
    :ivar expiry_time: Date and time of message expiration, as a UTC datetime
    :ivar enqueued_time: Date and time a cloud-to-device message was received by IoT Hub
    :ivar correlation_id: A property in a response message that typically contains the message_id
        of the request, in request-reply patterns
    :ivar user_id: An ID to specify the origin of messages
    :ivar connection_device_id: Set by IoT Hub on device-to-cloud messages. Contains the deviceId of
        the device that sent the message.
    :ivar connection_device_generation_id: Set by IoT Hub on device-to-cloud messages. Contains the
        generationId of the device that sent the message.
    :ivar connection_auth_method: Set by IoT Hub on device-to-cloud messages. Describes how the
        sending device authenticated.
    :ivar message_source: The transport a device-to-cloud message arrived on
    :ivar transport_options: Transport specific options. Never serialized.
    """

    _attribute_map = {
        "message_id": {"key": constant.MESSAGE_ID, "type": "str"},
        "to": {"key": constant.TO, "type": "str"},
        "expiry_time": {"key": constant.EXPIRY_TIME_UTC, "type": "iso-8601"},
        "enqueued_time": {"key": constant.ENQUEUED_TIME, "type": "iso-8601"},
        "correlation_id": {"key": constant.CORRELATION_ID, "type": "str"},
        "user_id": {"key": constant.USER_ID, "type": "str"},
        "connection_device_id": {"key": constant.CONNECTION_DEVICE_ID, "type": "str"},
        "connection_device_generation_id": {
            "key": constant.CONNECTION_DEVICE_GENERATION_ID,
            "type": "str",
        },
        "connection_auth_method": {
            "key": constant.CONNECTION_AUTH_METHOD,
            "type": "ConnectionAuthMethod",
        },
        "message_source": {"key": constant.MESSAGE_SOURCE, "type": "str"},
        "payload": {"key": constant.PAYLOAD, "type": "bytearray"},
        "properties": {"key": constant.PROPERTIES, "type": "{str}"},
    }

    _omit_empty = True

    def __init__(self, **kwargs):
        """
        Initializer for Message

        :param bytes payload: The bytes that constitute the payload
        :param dict properties: Custom message properties (str -> str)
        :param str message_id: A user-settable identifier for the message
        :param str to: Destination of a cloud-to-device message
        :param expiry_time: Date and time of message expiration
        :type expiry_time: datetime.datetime
        :param str correlation_id: The message_id of the request being replied to
        :param str user_id: An ID to specify the origin of the message
        :param dict transport_options: Transport specific options. Never serialized.
        """
        transport_options = kwargs.pop("transport_options", None)
        super(Message, self).__init__(**kwargs)
        self.message_id = kwargs.get("message_id", "")
        self.to = kwargs.get("to", "")
        self.expiry_time = kwargs.get("expiry_time", None)
        self.enqueued_time = kwargs.get("enqueued_time", None)
        self.correlation_id = kwargs.get("correlation_id", "")
        self.user_id = kwargs.get("user_id", "")
        self.connection_device_id = kwargs.get("connection_device_id", "")
        self.connection_device_generation_id = kwargs.get("connection_device_generation_id", "")
        self.connection_auth_method = kwargs.get("connection_auth_method", None)
        self.message_source = kwargs.get("message_source", "")
        self.payload = kwargs.get("payload", b"")
        self.properties = dict(kwargs.get("properties", None) or {})
        self.transport_options = dict(transport_options or {})

    @classmethod
    def create_reply(
        cls,
        request: "Message",
        payload: bytes = b"",
        properties: Optional[MessageProperties] = None,
    ) -> Self:
        """Factory method for creating a reply to a Message in a request-reply pattern.

        :param request: The Message being replied to.
        :type request: :class:`azure.iot.common.models.Message`
        :param bytes payload: The payload of the reply.
        :param dict properties: Custom properties of the reply.

        :returns: A new Message whose correlation_id is the message_id of the request.
        """
        return cls(correlation_id=request.message_id, payload=payload, properties=properties)

    def _wire_state(self):
        # Empty and absent values share a wire representation, so they compare equal.
        # Naive timestamps are encoded as UTC, so they compare as UTC.
        state = {}
        for attr, attr_desc in self._attribute_map.items():
            value = getattr(self, attr)
            if is_zero_value(value):
                value = None
            elif attr_desc["type"] == "iso-8601" and isinstance(value, datetime.datetime):
                value = as_utc(value)
            state[attr] = value
        return state

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self._wire_state() == other._wire_state()
        return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __str__(self):
        return str(self.payload)

    def get_size(self):
        total = 0
        total = total + sum(
            sys.getsizeof(v)
            for k, v in self._wire_state().items()
            if v is not None and k != "properties"
        )
        if self.properties:
            total = total + sum(
                sys.getsizeof(k) + sys.getsizeof(v) for k, v in self.properties.items()
            )
        return total
