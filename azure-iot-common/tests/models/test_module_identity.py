# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
from msrest.exceptions import ValidationError
from azure.iot.common.models import (
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

logging.basicConfig(level=logging.DEBUG)

fake_device_id = "MyPensieve"
fake_module_id = "Divination"
fake_managed_by = "Hogwarts"
fake_primary_key = "petrificus"
fake_secondary_key = "totalus"
fake_primary_thumbprint = "HELFKCPOXAIR9PVNOA3"
fake_secondary_thumbprint = "RGSHARLU4VYYFENINUF"
fake_etag = "taggedbymisnitryofmagic"


@pytest.mark.describe("ModuleIdentity")
class TestModuleIdentity(object):
    @pytest.mark.it("Instantiates with the provided device id and module id set as attributes")
    def test_ids(self):
        module = ModuleIdentity(device_id=fake_device_id, module_id=fake_module_id)
        assert module.device_id == fake_device_id
        assert module.module_id == fake_module_id

    @pytest.mark.it("Defaults all string fields to the empty string")
    @pytest.mark.parametrize(
        "field",
        [
            "module_id",
            "device_id",
            "managed_by",
            "last_activity_time",
            "connection_state",
            "connection_state_updated_time",
            "etag",
            "generation_id",
        ],
    )
    def test_default_strings(self, field):
        assert getattr(ModuleIdentity(), field) == ""

    @pytest.mark.it("Defaults the cloud to device message count to 0")
    def test_default_count(self):
        assert ModuleIdentity().cloud_to_device_message_count == 0

    @pytest.mark.it("Defaults to an authentication record with empty credential sub-records")
    def test_default_authentication(self):
        module = ModuleIdentity()
        assert isinstance(module.authentication, AuthenticationMechanism)
        assert module.authentication.type == ""
        assert module.authentication.symmetric_key == SymmetricKey()
        assert module.authentication.x509_thumbprint == X509Thumbprint()

    @pytest.mark.it("Passes client side validation when fully populated")
    def test_validate_ok(self, full_module_identity):
        assert full_module_identity.validate() == []

    @pytest.mark.it("Fails client side validation if the cloud to device message count is negative")
    def test_validate_negative_count(self):
        module = ModuleIdentity(cloud_to_device_message_count=-1)
        errors = module.validate()
        assert len(errors) == 1
        assert isinstance(errors[0], ValidationError)
        assert errors[0].rule == "minimum"

    @pytest.mark.it("Fails client side validation if the generation id exceeds 128 characters")
    def test_validate_generation_id(self):
        assert ModuleIdentity(generation_id="g" * 128).validate() == []
        errors = ModuleIdentity(generation_id="g" * 129).validate()
        assert len(errors) == 1
        assert errors[0].rule == "max_length"

    @pytest.mark.it("Uses the quoted etag as the If-Match value")
    def test_if_match(self):
        module = ModuleIdentity(etag=fake_etag)
        assert module.if_match == '"' + fake_etag + '"'

    @pytest.mark.it("Uses '*' as the If-Match value if there is no etag")
    def test_if_match_no_etag(self):
        assert ModuleIdentity().if_match == "*"


@pytest.mark.describe("AuthenticationMechanism")
class TestAuthenticationMechanism(object):
    @pytest.mark.it("Reports the authentication type it carries")
    @pytest.mark.parametrize(
        "auth_type, is_sas, is_x509, is_ca",
        [
            pytest.param("sas", True, False, False, id="SAS"),
            pytest.param("selfSigned", False, True, False, id="X509"),
            pytest.param("certificateAuthority", False, False, True, id="Certificate Authority"),
            pytest.param("none", False, False, False, id="None"),
        ],
    )
    def test_type_queries(self, auth_type, is_sas, is_x509, is_ca):
        auth = AuthenticationMechanism(type=auth_type)
        assert auth.is_sas() is is_sas
        assert auth.is_x509() is is_x509
        assert auth.is_certificate_authority() is is_ca

    @pytest.mark.it("Keeps the provided credential sub-records")
    def test_sub_records(self):
        symmetric_key = SymmetricKey(primary_key=fake_primary_key)
        auth = AuthenticationMechanism(type="sas", symmetric_key=symmetric_key)
        assert auth.symmetric_key is symmetric_key
        assert auth.x509_thumbprint.primary_thumbprint == ""


@pytest.mark.describe("ModuleIdentity - Factories")
class TestModuleIdentityFactories(object):
    @pytest.mark.it("Creates a module identity with SAS authentication")
    def test_create_with_sas(self):
        module = create_module_with_sas(
            fake_device_id, fake_module_id, fake_managed_by, fake_primary_key, fake_secondary_key
        )
        assert module.device_id == fake_device_id
        assert module.module_id == fake_module_id
        assert module.managed_by == fake_managed_by
        assert module.authentication.type == "sas"
        assert module.authentication.symmetric_key.primary_key == fake_primary_key
        assert module.authentication.symmetric_key.secondary_key == fake_secondary_key
        assert module.authentication.x509_thumbprint == X509Thumbprint()
        assert module.etag == ""

    @pytest.mark.it("Creates a module identity with X509 authentication")
    def test_create_with_x509(self):
        module = create_module_with_x509(
            fake_device_id,
            fake_module_id,
            fake_managed_by,
            fake_primary_thumbprint,
            fake_secondary_thumbprint,
        )
        assert module.authentication.type == "selfSigned"
        assert module.authentication.x509_thumbprint.primary_thumbprint == fake_primary_thumbprint
        assert (
            module.authentication.x509_thumbprint.secondary_thumbprint == fake_secondary_thumbprint
        )
        assert module.authentication.symmetric_key == SymmetricKey()

    @pytest.mark.it("Creates a module identity with certificate authority authentication")
    def test_create_with_ca(self):
        module = create_module_with_certificate_authority(
            fake_device_id, fake_module_id, fake_managed_by
        )
        assert module.authentication.type == "certificateAuthority"
        assert module.authentication.symmetric_key == SymmetricKey()
        assert module.authentication.x509_thumbprint == X509Thumbprint()

    @pytest.mark.it("Creates module identity updates carrying the provided etag")
    def test_update_factories(self):
        sas = update_module_with_sas(
            fake_device_id,
            fake_module_id,
            fake_managed_by,
            fake_etag,
            fake_primary_key,
            fake_secondary_key,
        )
        x509 = update_module_with_x509(
            fake_device_id,
            fake_module_id,
            fake_managed_by,
            fake_etag,
            fake_primary_thumbprint,
            fake_secondary_thumbprint,
        )
        ca = update_module_with_certificate_authority(
            fake_device_id, fake_module_id, fake_managed_by, fake_etag
        )
        for module in (sas, x509, ca):
            assert module.etag == fake_etag
            assert module.device_id == fake_device_id
            assert module.module_id == fake_module_id
        assert sas.authentication.is_sas()
        assert x509.authentication.is_x509()
        assert ca.authentication.is_certificate_authority()


@pytest.mark.describe("ensure_quoted()")
class TestEnsureQuoted(object):
    @pytest.mark.it("Quotes a bare etag")
    def test_bare(self):
        assert ensure_quoted("abc") == '"abc"'

    @pytest.mark.it("Leaves an already quoted etag unchanged")
    def test_quoted(self):
        assert ensure_quoted('"abc"') == '"abc"'

    @pytest.mark.it("Leaves a weak etag unchanged")
    def test_weak(self):
        assert ensure_quoted('W/"abc"') == 'W/"abc"'

    @pytest.mark.it("Leaves non-string values unchanged")
    def test_non_string(self):
        assert ensure_quoted(None) is None
