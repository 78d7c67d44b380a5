# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the azure-iot-common package
"""

VERSION = "1.0.0"
DEFAULT_ENCODING = "utf-8"

# Message wire keys
MESSAGE_ID = "MessageId"
TO = "To"
EXPIRY_TIME_UTC = "ExpiryTimeUtc"
ENQUEUED_TIME = "EnqueuedTime"
CORRELATION_ID = "CorrelationId"
USER_ID = "UserId"
CONNECTION_DEVICE_ID = "ConnectionDeviceId"
CONNECTION_DEVICE_GENERATION_ID = "ConnectionDeviceGenerationId"
CONNECTION_AUTH_METHOD = "ConnectionAuthMethod"
MESSAGE_SOURCE = "MessageSource"
PAYLOAD = "Payload"
PROPERTIES = "Properties"

# Authentication types, as named by IoT Hub
AUTH_TYPE_SAS = "sas"
AUTH_TYPE_SELF_SIGNED = "selfSigned"
AUTH_TYPE_CERTIFICATE_AUTHORITY = "certificateAuthority"
AUTH_TYPE_NONE = "none"

GENERATION_ID_MAX_LENGTH = 128
# Matches the IoT Hub device-to-cloud message size quota
TELEMETRY_MESSAGE_SIZE_LIMIT = 262144
