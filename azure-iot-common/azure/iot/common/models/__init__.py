"""Azure IoT Common Models

This package provides the object models of the messages and module identities exchanged with IoT Hub.
"""

from .message import Message, ConnectionAuthMethod
from .module_identity import (
    ModuleIdentity,
    AuthenticationMechanism,
    SymmetricKey,
    X509Thumbprint,
    ensure_quoted,
    create_module_with_sas,
    create_module_with_x509,
    create_module_with_certificate_authority,
    update_module_with_sas,
    update_module_with_x509,
    update_module_with_certificate_authority,
)
