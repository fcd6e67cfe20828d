"""Configuration globale de l'application."""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from gestion_clinique.config.constants import (
    OPTIONS_FILENAME, DEFAULT_LOGO_URL, DEFAULT_THEME,
)
from gestion_clinique.core.exceptions import ConfigError

ENV_PREFIX = "GESTION_CLINIQUE_"


@dataclass
class StorageConfig:
    """Configuration du stockage des options."""
    data_dir: Path = field(default=None)
    options_path: Path = field(default=None)

    def __post_init__(self):
        if self.data_dir is None:
            self.data_dir = Path.cwd() / "server" / "data"
        if self.options_path is None:
            self.options_path = self.data_dir / OPTIONS_FILENAME


@dataclass
class ApiClientConfig:
    """Configuration des clients HTTP."""
    base_url: str = "http://localhost:8000/api"
    timeout: float = 30.0


@dataclass
class ServerConfig:
    """Configuration du serveur web."""
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class PdfConfig:
    """Configuration des documents imprimables."""
    logo_url: str = DEFAULT_LOGO_URL
    theme: dict = field(default_factory=lambda: dict(DEFAULT_THEME))


@dataclass
class AppConfig:
    """Configuration principale de l'application."""
    storage: StorageConfig = field(default_factory=StorageConfig)
    api: ApiClientConfig = field(default_factory=ApiClientConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)
    log_level: str = "INFO"

    @classmethod
    def depuis_env(cls, environ: Optional[dict] = None) -> "AppConfig":
        """Construit la configuration a partir des variables GESTION_CLINIQUE_*."""
        env = os.environ if environ is None else environ

        def lire(nom: str) -> Optional[str]:
            valeur = env.get(ENV_PREFIX + nom)
            return valeur.strip() if valeur and valeur.strip() else None

        config = cls()
        data_dir = lire("DATA_DIR")
        if data_dir:
            config.storage = StorageConfig(data_dir=Path(data_dir))
        if lire("API_URL"):
            config.api.base_url = lire("API_URL")
        if lire("API_TIMEOUT"):
            config.api.timeout = _convertir(lire("API_TIMEOUT"), float, "API_TIMEOUT")
        if lire("HOST"):
            config.server.host = lire("HOST")
        if lire("PORT"):
            config.server.port = _convertir(lire("PORT"), int, "PORT")
        if lire("LOGO_URL"):
            config.pdf.logo_url = lire("LOGO_URL")
        if lire("LOG_LEVEL"):
            config.log_level = lire("LOG_LEVEL").upper()
        return config


def _convertir(valeur: str, type_cible, nom: str):
    try:
        return type_cible(valeur)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{nom} invalide : {valeur!r}")
