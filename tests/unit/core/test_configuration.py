"""
Tests for ClientConfiguration.
"""

import pytest

from curl_client.core.config import ClientConfiguration, OPTION_TYPES
from curl_client.core.exceptions import DomainError, InvalidArgumentError


class TestSetOption:
    """Tests for ClientConfiguration.set."""

    def test_valid_option_is_stored(self):
        """Valid option is readable back."""
        config = ClientConfiguration()
        config.set("timeout", 30)

        assert config.get("timeout") == 30
        assert "timeout" in config

    def test_set_returns_configuration(self):
        """set() is chainable."""
        config = ClientConfiguration()

        assert config.set("timeout", 5).set("max_redirects", 3) is config
        assert len(config) == 2

    def test_last_write_wins(self):
        """Setting an option twice keeps the last value."""
        config = ClientConfiguration()
        config.set("timeout", 5)
        config.set("timeout", 15)

        assert config.get("timeout") == 15

    def test_empty_name_raises_domain_error(self):
        """Empty option name is a domain error."""
        with pytest.raises(DomainError, match="empty string"):
            ClientConfiguration().set("", 5)

    @pytest.mark.parametrize("value", [0, False, "", None])
    def test_falsy_value_raises_domain_error(self, value):
        """Falsy values are rejected."""
        with pytest.raises(DomainError, match="Invalid option value"):
            ClientConfiguration().set("timeout", value)

    def test_unknown_option_raises_invalid_argument(self):
        """Unknown option name is rejected."""
        with pytest.raises(InvalidArgumentError, match="Unknown client configuration option"):
            ClientConfiguration().set("verify_ssl", True)

    def test_wrong_type_raises_invalid_argument(self):
        """String for an integer option is rejected."""
        with pytest.raises(InvalidArgumentError, match="Incorrect value type for the 'max_redirects' option"):
            ClientConfiguration().set("max_redirects", "5")

    def test_bool_is_not_accepted_as_int(self):
        """True is not a valid timeout even though bool subclasses int."""
        with pytest.raises(InvalidArgumentError):
            ClientConfiguration().set("timeout", True)

    def test_int_is_not_accepted_as_bool(self):
        """1 is not a valid value for a boolean option."""
        with pytest.raises(InvalidArgumentError):
            ClientConfiguration().set("enable_compression", 1)

    @pytest.mark.parametrize("method", ["basic", "digest", "ntlm", "gssnegotiate", "any", "Digest", "NTLM"])
    def test_http_auth_methods_case_insensitive(self, method):
        """All auth methods are accepted regardless of case."""
        config = ClientConfiguration().set("http_auth", method)

        assert config.get("http_auth") == method

    def test_unknown_http_auth_method_rejected(self):
        """Auth method outside the allowed set is rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid value for the setting: http_auth"):
            ClientConfiguration().set("http_auth", "kerberos")

    def test_default_protocol_restricted_to_http_https(self):
        """default_protocol accepts only http/https."""
        config = ClientConfiguration().set("default_protocol", "HTTPS")
        assert config.get("default_protocol") == "HTTPS"

        with pytest.raises(InvalidArgumentError):
            config.set("default_protocol", "ftp")

    def test_failed_set_keeps_previous_value(self):
        """A rejected value does not overwrite the stored one."""
        config = ClientConfiguration().set("timeout", 10)

        with pytest.raises(InvalidArgumentError):
            config.set("timeout", "20")

        assert config.get("timeout") == 10

    def test_every_declared_option_has_a_type(self):
        """The option set is fixed and typed."""
        assert set(OPTION_TYPES) == {
            "timeout", "connect_timeout", "max_redirects", "http_auth",
            "default_protocol", "enable_compression", "enable_decompression",
        }


class TestSetAll:
    """Tests for ClientConfiguration.set_all."""

    def test_set_all_applies_each_option(self):
        """All options from the mapping are stored."""
        config = ClientConfiguration().set_all({"timeout": 10, "enable_decompression": True})

        assert config.as_dict() == {"timeout": 10, "enable_decompression": True}

    def test_empty_mapping_raises_domain_error(self):
        """Empty configuration is rejected."""
        with pytest.raises(DomainError, match="Empty configuration"):
            ClientConfiguration().set_all({})

    def test_constructor_uses_set_all(self):
        """Options passed to the constructor are validated."""
        with pytest.raises(InvalidArgumentError):
            ClientConfiguration({"timeout": "10"})

    def test_partial_application_on_error(self):
        """Options before the failing one stay applied."""
        config = ClientConfiguration()

        with pytest.raises(InvalidArgumentError):
            config.set_all({"timeout": 10, "unknown": 1, "max_redirects": 2})

        assert config.get("timeout") == 10
        assert "max_redirects" not in config


class TestReading:
    """Tests for reading options."""

    def test_get_default(self):
        """get() returns the default for unset options."""
        assert ClientConfiguration().get("timeout", 99) == 99

    def test_is_enabled(self):
        """is_enabled reflects boolean options."""
        config = ClientConfiguration({"enable_compression": True})

        assert config.is_enabled("enable_compression") is True
        assert config.is_enabled("enable_decompression") is False

    def test_remove(self):
        """remove() drops the option; removing twice is harmless."""
        config = ClientConfiguration({"timeout": 10})
        config.remove("timeout")
        config.remove("timeout")

        assert "timeout" not in config

    def test_snapshot_is_read_only(self):
        """Snapshot cannot be modified."""
        snapshot = ClientConfiguration({"timeout": 10}).snapshot()

        with pytest.raises(TypeError):
            snapshot["timeout"] = 20  # type: ignore[index]

    def test_snapshot_is_detached_from_store(self):
        """Later changes do not affect an earlier snapshot."""
        config = ClientConfiguration({"timeout": 10})
        snapshot = config.snapshot()
        config.set("timeout", 20).set("max_redirects", 5)

        assert dict(snapshot) == {"timeout": 10}
