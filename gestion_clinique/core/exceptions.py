"""Exceptions personnalisees pour Gestion Clinique."""

from typing import Optional


class GestionCliniqueError(Exception):
    """Exception de base."""


class StorageError(GestionCliniqueError):
    """Erreur de lecture/ecriture du stockage des options."""


class TransportError(GestionCliniqueError):
    """Erreur reseau ou HTTP lors d'un appel a l'API."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class ValidationError(GestionCliniqueError):
    """Donnees de formulaire invalides."""

    def __init__(self, erreurs: list[str]):
        super().__init__("; ".join(erreurs))
        self.erreurs = list(erreurs)


class ConfigError(GestionCliniqueError):
    """Erreur de configuration."""
