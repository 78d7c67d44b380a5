# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import datetime
import pytest
from azure.iot.common.models import (
    Message,
    ConnectionAuthMethod,
    ModuleIdentity,
    AuthenticationMechanism,
    SymmetricKey,
    X509Thumbprint,
)
from azure.iot.common.serializer import HubSerializer

"""---Constants---"""

fake_device_id = "MyPensieve"
fake_module_id = "Divination"
fake_managed_by = "Hogwarts"
fake_primary_key = "cGV0cmlmaWN1cw=="
fake_secondary_key = "dG90YWx1cw=="
fake_primary_thumbprint = "9A0B3C5D7E1F2A4B6C8D0E2F4A6B8C0D2E4F6A8B"
fake_secondary_thumbprint = "1F2E3D4C5B6A79880796A5B4C3D2E1F0A1B2C3D4"
fake_etag = 'W/"taggedbyministryofmagic"'
fake_generation_id = "637112345678901234"
fake_time = "2019-12-04T01:23:45.6789012Z"
fake_expiry_time = datetime.datetime(2025, 1, 2, 3, 4, 5, 250000, tzinfo=datetime.timezone.utc)
fake_enqueued_time = datetime.datetime(2024, 6, 7, 8, 9, 10, tzinfo=datetime.timezone.utc)


"""----Shared fixtures----"""


@pytest.fixture
def serializer():
    return HubSerializer()


@pytest.fixture
def connection_auth_method():
    return ConnectionAuthMethod(scope="device", type="sas", issuer="iot-hub")


@pytest.fixture
def full_message(connection_auth_method):
    # Not a realistic message (D2C and C2D fields together), but exercises every field
    return Message(
        message_id="req-42",
        to="/devices/dev-7/messages/devicebound",
        expiry_time=fake_expiry_time,
        enqueued_time=fake_enqueued_time,
        correlation_id="corr-1",
        user_id="user-1",
        connection_device_id="dev-7",
        connection_device_generation_id="636000000000000000",
        connection_auth_method=connection_auth_method,
        message_source="Telemetry",
        payload=b"\x00\x01binary\xff",
        properties={"temp": "22", "unit": "C"},
    )


@pytest.fixture
def full_module_identity():
    return ModuleIdentity(
        module_id=fake_module_id,
        device_id=fake_device_id,
        authentication=AuthenticationMechanism(
            type="sas",
            symmetric_key=SymmetricKey(
                primary_key=fake_primary_key, secondary_key=fake_secondary_key
            ),
            x509_thumbprint=X509Thumbprint(),
        ),
        managed_by=fake_managed_by,
        last_activity_time=fake_time,
        cloud_to_device_message_count=0,
        connection_state="Disconnected",
        connection_state_updated_time=fake_time,
        etag=fake_etag,
        generation_id=fake_generation_id,
    )
