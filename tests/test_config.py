import pytest
from django.test import override_settings

from shwary.config import ShwaryConfig
from shwary.exceptions import AuthenticationError, ConfigurationError


def test_defaults():
    config = ShwaryConfig(merchant_id="test-merchant-id", merchant_key="test-merchant-key")

    assert config.merchant_id == "test-merchant-id"
    assert config.merchant_key == "test-merchant-key"
    assert config.base_url == "https://api.shwary.com"
    assert config.timeout == 30
    assert config.sandbox is False


def test_all_parameters_and_trailing_slash():
    config = ShwaryConfig(
        merchant_id="merchant-123",
        merchant_key="secret-key",
        base_url="https://custom.api.com/",
        timeout=60,
        sandbox=True,
    )

    assert config.base_url == "https://custom.api.com"
    assert config.timeout == 60
    assert config.sandbox is True


def test_api_url_and_full_url():
    config = ShwaryConfig(merchant_id="m", merchant_key="k")

    assert config.api_url == "https://api.shwary.com/api/v1"
    assert config.get_full_url("/merchants/payment/DRC") == "https://api.shwary.com/api/v1/merchants/payment/DRC"


@pytest.mark.parametrize("kwargs, message", [
    ({"merchant_id": "", "merchant_key": "valid-key"}, "Merchant ID is required"),
    ({"merchant_id": "valid-id", "merchant_key": ""}, "Merchant Key is required"),
    ({"merchant_id": "valid-id", "merchant_key": "valid-key", "timeout": 0}, "Timeout must be at least 1 second"),
])
def test_invalid_configuration(kwargs, message):
    with pytest.raises(ConfigurationError, match=message):
        ShwaryConfig(**kwargs)


def test_config_is_read_only():
    config = ShwaryConfig(merchant_id="m", merchant_key="k")

    with pytest.raises(AttributeError):
        config.sandbox = True


def test_repr_hides_merchant_key():
    assert "secret" not in repr(ShwaryConfig(merchant_id="m", merchant_key="secret"))


def test_from_dict():
    config = ShwaryConfig.from_dict({
        "merchant_id": "array-merchant-id",
        "merchant_key": "array-merchant-key",
        "base_url": "https://custom.api.com",
        "timeout": 45,
        "sandbox": True,
    })

    assert config.merchant_id == "array-merchant-id"
    assert config.base_url == "https://custom.api.com"
    assert config.timeout == 45
    assert config.sandbox is True


def test_from_dict_minimal():
    config = ShwaryConfig.from_dict({"merchant_id": "merchant", "merchant_key": "key"})

    assert config.base_url == "https://api.shwary.com"
    assert config.timeout == 30
    assert config.sandbox is False


def test_from_django_settings():
    config = ShwaryConfig.from_django_settings()

    assert config.merchant_id == "settings-merchant"
    assert config.merchant_key == "settings-key"
    assert config.sandbox is True


@override_settings(SHWARY_MERCHANT_KEY="")
def test_from_django_settings_without_credentials():
    with pytest.raises(AuthenticationError) as exc:
        ShwaryConfig.from_django_settings()

    assert exc.value.kind == "missing_credentials"
