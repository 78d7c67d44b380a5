# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module converts IoT Hub messages and module identities to and from their JSON wire form.

Leaf values (base64 payloads, ISO-8601 timestamps, property dictionaries) are converted by msrest.
The walk over the models is done here: zero-valued Message fields are omitted, and every decode
failure names the wire key of the offending field.
"""
import base64
import binascii
import json
import logging
from msrest.serialization import Model, Serializer, Deserializer
from msrest.exceptions import DeserializationError, ValidationError
from . import models
from .custom_typing import JSONDocument, WireData
from .config import SerializerConfig
from .exceptions import DecodeError, NotationError
from .models.message import as_utc, is_zero_value

logger = logging.getLogger(__name__)

_client_models = {k: v for k, v in models.__dict__.items() if isinstance(v, type)}

# JSON kinds accepted for each leaf type before conversion
_expected_json_types = {
    "str": (str,),
    "int": (int,),
    "iso-8601": (str,),
    "bytearray": (str,),
    "{str}": (dict,),
}


def _json_kind(value):
    if value is None:
        return "null"
    return type(value).__name__


class HubSerializer(object):
    """Encodes and decodes IoT Hub records as JSON documents.

    Encoding is total: every well formed record produces a document. Decoding raises
    NotationError if the document is not valid JSON, and DecodeError if a field has the
    wrong type. No partially decoded record is ever returned.
    """

    def __init__(self, config=None):
        """Initializer for HubSerializer

        :param config: Output formatting options. Defaults are used if not provided.
        :type config: :class:`azure.iot.common.config.SerializerConfig`
        """
        self.config = config if config is not None else SerializerConfig()
        self._serialize = Serializer(_client_models)
        self._deserialize = Deserializer(_client_models)

    def encode_message(self, message):
        """Encode a Message as a JSON document.

        Absent and empty fields are omitted. Transport options are never included.

        :param message: The message to encode
        :type message: :class:`azure.iot.common.models.Message`
        :returns: The encoded document
        :rtype: bytes
        """
        logger.debug("Encoding Message (message_id: {})".format(message.message_id))
        return self._dumps(self._encode_model(message))

    def decode_message(self, data):
        """Decode a JSON document into a Message.

        Unknown fields are ignored. The resulting Message has no transport options.

        :param data: The document to decode
        :type data: bytes or str
        :raises: :class:`azure.iot.common.exceptions.NotationError` if the document is not JSON
        :raises: :class:`azure.iot.common.exceptions.DecodeError` if a field has an invalid value
        :rtype: :class:`azure.iot.common.models.Message`
        """
        logger.debug("Decoding Message")
        return self._decode_model(models.Message, self._loads(data))

    def encode_module_identity(self, module_identity):
        """Encode a ModuleIdentity as a JSON document.

        Every field is emitted, including empty strings and a zero message count, along with both
        credential sub-objects of the authentication record.

        :type module_identity: :class:`azure.iot.common.models.ModuleIdentity`
        :rtype: bytes
        """
        logger.debug(
            "Encoding ModuleIdentity (device_id: {}, module_id: {})".format(
                module_identity.device_id, module_identity.module_id
            )
        )
        return self._dumps(self._encode_model(module_identity))

    def decode_module_identity(self, data):
        """Decode a JSON document into a ModuleIdentity.

        :raises: :class:`azure.iot.common.exceptions.NotationError` if the document is not JSON
        :raises: :class:`azure.iot.common.exceptions.DecodeError` if a field has an invalid value
        :rtype: :class:`azure.iot.common.models.ModuleIdentity`
        """
        logger.debug("Decoding ModuleIdentity")
        return self._decode_model(models.ModuleIdentity, self._loads(data))

    def encode_connection_auth_method(self, auth_method):
        """Encode a ConnectionAuthMethod as a JSON document.

        Every field is emitted, including empty strings.

        :type auth_method: :class:`azure.iot.common.models.ConnectionAuthMethod`
        :rtype: bytes
        """
        logger.debug("Encoding ConnectionAuthMethod")
        return self._dumps(self._encode_model(auth_method))

    def decode_connection_auth_method(self, data):
        """Decode a JSON document into a ConnectionAuthMethod.

        :raises: :class:`azure.iot.common.exceptions.NotationError` if the document is not JSON
        :raises: :class:`azure.iot.common.exceptions.DecodeError` if a field has an invalid value
        :rtype: :class:`azure.iot.common.models.ConnectionAuthMethod`
        """
        logger.debug("Decoding ConnectionAuthMethod")
        return self._decode_model(models.ConnectionAuthMethod, self._loads(data))

    def _dumps(self, serialized):
        text = json.dumps(serialized, **self.config.json_dumps_kwargs())
        return text.encode(self.config.encoding)

    def _loads(self, data: WireData) -> JSONDocument:
        try:
            if isinstance(data, (bytes, bytearray)):
                data = bytes(data).decode(self.config.encoding)
            document = json.loads(data)
        except json.JSONDecodeError as e:
            raise NotationError(
                "Document is not valid JSON: {}".format(e.msg),
                lineno=e.lineno,
                colno=e.colno,
                pos=e.pos,
            ) from e
        except UnicodeDecodeError as e:
            raise NotationError(
                "Document is not valid {}".format(self.config.encoding), pos=e.start
            ) from e

        if not isinstance(document, dict):
            raise DecodeError(
                None, "Expected a JSON object, got {}".format(_json_kind(document))
            )
        return document

    def _encode_model(self, obj: Model) -> JSONDocument:
        omit_empty = getattr(obj, "_omit_empty", False)
        serialized = {}
        for attr, attr_desc in obj._attribute_map.items():
            value = getattr(obj, attr, None)
            if value is None or (omit_empty and is_zero_value(value)):
                continue
            if isinstance(value, Model):
                serialized[attr_desc["key"]] = self._encode_model(value)
            else:
                serialized[attr_desc["key"]] = self._serialize.serialize_data(
                    value, attr_desc["type"]
                )
        return serialized

    def _decode_model(self, model_class, document, path=None):
        kwargs = {}
        for attr, attr_desc in model_class._attribute_map.items():
            key = attr_desc["key"]
            field_name = key if path is None else "{}.{}".format(path, key)
            raw = document.get(key)
            if raw is None:
                continue
            value = self._decode_field(attr_desc["type"], raw, field_name)
            try:
                Serializer.validate(value, field_name, **model_class._validation.get(attr, {}))
            except ValidationError as e:
                raise DecodeError(
                    field_name, "Value for field '{}' violates rule '{}'".format(field_name, e.rule)
                ) from e
            kwargs[attr] = value

        known_keys = set(attr_desc["key"] for attr_desc in model_class._attribute_map.values())
        for key in document:
            if key not in known_keys:
                logger.debug(
                    "Ignoring unknown field '{}' while decoding {}".format(key, model_class.__name__)
                )
        return model_class(**kwargs)

    def _decode_field(self, data_type, raw, field_name):
        model_class = self._deserialize.dependencies.get(data_type)
        if model_class is not None:
            if not isinstance(raw, dict):
                raise DecodeError(
                    field_name,
                    "Expected a JSON object for field '{}', got {}".format(
                        field_name, _json_kind(raw)
                    ),
                )
            return self._decode_model(model_class, raw, field_name)

        if not isinstance(raw, _expected_json_types[data_type]) or isinstance(raw, bool):
            raise DecodeError(
                field_name, "Unexpected {} for field '{}'".format(_json_kind(raw), field_name)
            )

        if data_type == "bytearray":
            try:
                return base64.b64decode(raw, validate=True)
            except (binascii.Error, ValueError) as e:
                raise DecodeError(
                    field_name, "Field '{}' is not valid base64".format(field_name)
                ) from e

        if data_type == "{str}":
            for key, value in raw.items():
                if not isinstance(value, str):
                    raise DecodeError(
                        field_name,
                        "Unexpected {} for property '{}' of field '{}'".format(
                            _json_kind(value), key, field_name
                        ),
                    )

        try:
            value = self._deserialize.deserialize_data(raw, data_type)
        except DeserializationError as e:
            raise DecodeError(field_name) from e

        if data_type == "iso-8601":
            value = as_utc(value)
        return value


_default_serializer = HubSerializer()


def encode_message(message: models.Message) -> bytes:
    """Encode a Message as a JSON document using the default options"""
    return _default_serializer.encode_message(message)


def decode_message(data: WireData) -> models.Message:
    """Decode a JSON document into a Message"""
    return _default_serializer.decode_message(data)


def encode_module_identity(module_identity: models.ModuleIdentity) -> bytes:
    """Encode a ModuleIdentity as a JSON document using the default options"""
    return _default_serializer.encode_module_identity(module_identity)


def decode_module_identity(data: WireData) -> models.ModuleIdentity:
    """Decode a JSON document into a ModuleIdentity"""
    return _default_serializer.decode_module_identity(data)
