from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from geoipfinder import GeoIPResolver, create_adapter, create_resolver
from geoipfinder.adapters import GeoIP2ReaderAdapter, GeoIP2WebServiceAdapter
from geoipfinder.config import Settings
from geoipfinder.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Aísla los tests de las variables GEOIPFINDER_* del entorno real."""
    for name in (
        "DATABASE_PATH", "ACCOUNT_ID", "LICENSE_KEY", "SERVICE_URL", "TIMEOUT",
        "MAX_RETRIES", "MODEL", "LOCALE", "LOG_LEVEL", "LOG_JSON",
    ):
        monkeypatch.delenv(f"GEOIPFINDER_{name}", raising=False)


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.database_path is None
        assert settings.account_id is None
        assert settings.service_url == "https://geoip.maxmind.com/geoip/v2.1"
        assert settings.model == "city"
        assert settings.locale == "en"
        assert settings.timeout == 5
        assert settings.max_retries == 3
        assert settings.log_json is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEOIPFINDER_ACCOUNT_ID", "1234")
        monkeypatch.setenv("GEOIPFINDER_LICENSE_KEY", "abc")
        monkeypatch.setenv("GEOIPFINDER_LOCALE", "pt-BR")
        monkeypatch.setenv("GEOIPFINDER_MODEL", "country")
        monkeypatch.setenv("GEOIPFINDER_LOG_JSON", "true")

        settings = Settings()

        assert settings.account_id == 1234
        assert settings.license_key == "abc"
        assert settings.locale == "pt-BR"
        assert settings.model == "country"
        assert settings.log_json is True

    def test_invalid_model(self):
        with pytest.raises(ValidationError):
            Settings(model="isp")

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Settings(timeout=0)


class TestFactory:

    def test_database_has_priority(self):
        settings = Settings(database_path="/data/GeoLite2-City.mmdb", account_id=1, license_key="k")
        adapter = MagicMock(spec=GeoIP2ReaderAdapter)

        with patch.object(GeoIP2ReaderAdapter, "from_database", return_value=adapter) as from_database:
            assert create_adapter(settings) is adapter

        from_database.assert_called_once_with("/data/GeoLite2-City.mmdb", "city")

    def test_webservice(self):
        settings = Settings(account_id=1, license_key="k", timeout=2.5, max_retries=1)

        adapter = create_adapter(settings)

        assert isinstance(adapter, GeoIP2WebServiceAdapter)
        assert adapter.timeout == 2.5
        assert adapter.url == "https://geoip.maxmind.com/geoip/v2.1/"
        adapter.close()

    def test_missing_configuration(self):
        with pytest.raises(ConfigurationError, match="Falta configuración"):
            create_adapter(Settings())

    def test_missing_database_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="No existe la base de datos"):
            create_adapter(Settings(database_path=str(tmp_path / "nope.mmdb")))

    def test_create_resolver(self):
        settings = Settings(account_id=1, license_key="k", locale="fr")

        resolver = create_resolver(settings)

        assert isinstance(resolver, GeoIPResolver)
        assert resolver.locale == "fr"
        assert isinstance(resolver.adapter, GeoIP2WebServiceAdapter)
        resolver.close()
