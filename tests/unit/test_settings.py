"""Tests de la configuration."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from gestion_clinique.config.settings import AppConfig, StorageConfig
from gestion_clinique.core.exceptions import ConfigError


class TestAppConfig:

    def test_defauts(self):
        config = AppConfig.depuis_env({})
        assert config.storage.options_path.name == "options.json"
        assert config.server.port == 8000
        assert config.log_level == "INFO"

    def test_chemin_options_derive_du_repertoire(self, tmp_path):
        storage = StorageConfig(data_dir=tmp_path)
        assert storage.options_path == tmp_path / "options.json"

    def test_variables_environnement(self, tmp_path):
        config = AppConfig.depuis_env({
            "GESTION_CLINIQUE_DATA_DIR": str(tmp_path),
            "GESTION_CLINIQUE_API_URL": "https://clinique.ma/api",
            "GESTION_CLINIQUE_API_TIMEOUT": "2.5",
            "GESTION_CLINIQUE_PORT": "9000",
            "GESTION_CLINIQUE_LOG_LEVEL": "debug",
        })
        assert config.storage.options_path == tmp_path / "options.json"
        assert config.api.base_url == "https://clinique.ma/api"
        assert config.api.timeout == 2.5
        assert config.server.port == 9000
        assert config.log_level == "DEBUG"

    def test_valeur_vide_ignoree(self):
        config = AppConfig.depuis_env({"GESTION_CLINIQUE_HOST": "  "})
        assert config.server.host == "0.0.0.0"

    def test_port_invalide(self):
        with pytest.raises(ConfigError):
            AppConfig.depuis_env({"GESTION_CLINIQUE_PORT": "abc"})

    def test_theme_independant_par_instance(self):
        a, b = AppConfig(), AppConfig()
        a.pdf.theme["primary"] = "0 0% 0%"
        assert b.pdf.theme["primary"] != "0 0% 0%"
