"""
Tests for authenticator settings parsing.
"""

import pytest

from smsotp_core.config import AuthenticatorSettings
from smsotp_core.exceptions import ConfigurationError


class TestAuthenticatorSettings:

    def test_defaults(self):
        """Empty config should yield documented defaults."""
        settings = AuthenticatorSettings.from_mapping({})

        assert settings.length == 6
        assert settings.ttl == 300
        assert settings.simulation is True
        assert settings.phone_attribute_name == "mobile_number"
        assert settings.sender_name == "Keycloak"
        assert settings.broker is None

    def test_none_config(self):
        assert AuthenticatorSettings.from_mapping(None).length == 6

    def test_parses_string_values(self):
        settings = AuthenticatorSettings.from_mapping({
            "length": "8",
            "ttl": "120",
            "simulation": "false",
            "phone_attribute_name": "phone",
            "brokers": "zenvia",
            "senderName": "Acme",
            "broker_key": "user",
            "broker_secret": "s3cr3tvalue",
            "broker_short_code": "12345",
        })

        assert settings.length == 8
        assert settings.ttl == 120
        assert settings.simulation is False
        assert settings.phone_attribute_name == "phone"
        assert settings.broker == "zenvia"
        assert settings.sender_name == "Acme"

        broker_config = settings.broker_config()
        assert broker_config.key == "user"
        assert broker_config.secret == "s3cr3tvalue"
        assert broker_config.short_code == "12345"

    def test_blank_values_use_defaults(self):
        settings = AuthenticatorSettings.from_mapping({"phone_attribute_name": "  ", "length": ""})

        assert settings.phone_attribute_name == "mobile_number"
        assert settings.length == 6

    @pytest.mark.parametrize("config,key", [
        ({"length": "abc"}, "length"),
        ({"length": "0"}, "length"),
        ({"ttl": "-1"}, "ttl"),
        ({"ttl": "1.5"}, "ttl"),
    ])
    def test_malformed_numbers(self, config, key):
        with pytest.raises(ConfigurationError) as exc_info:
            AuthenticatorSettings.from_mapping(config)

        assert key in str(exc_info.value)

    def test_secret_not_in_repr(self):
        settings = AuthenticatorSettings.from_mapping({"broker_secret": "topsecretvalue"})

        assert "topsecretvalue" not in repr(settings)
        assert "topsecretvalue" not in repr(settings.broker_config())

    @pytest.mark.parametrize("value", ["maybe", "enabled", "2"])
    def test_unrecognised_simulation_flag_is_rejected(self, value):
        """Only well-known boolean spellings are accepted for the simulation flag."""
        with pytest.raises(ConfigurationError) as exc_info:
            AuthenticatorSettings.from_mapping({"simulation": value})

        assert "simulation" in str(exc_info.value)

    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("TRUE", True), ("1", True), ("yes", True),
        ("false", False), ("0", False), ("no", False), ("off", False),
    ])
    def test_simulation_flag_spellings(self, value, expected):
        assert AuthenticatorSettings.from_mapping({"simulation": value}).simulation is expected
