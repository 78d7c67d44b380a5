""" Azure IoT Common Library

This library provides the message and module identity models shared by the Azure IoT Hub
device and service libraries, along with their JSON wire form.
"""

from .exceptions import SchemaError, DecodeError, NotationError  # noqa: F401
from .config import SerializerConfig  # noqa: F401
from .models import Message, ConnectionAuthMethod, ModuleIdentity  # noqa: F401
from .serializer import (  # noqa: F401
    HubSerializer,
    encode_message,
    decode_message,
    encode_module_identity,
    decode_module_identity,
)
from . import models  # noqa: F401
