"""Gestion Clinique - listes d'options partagees, profil entreprise et documents imprimables."""

__version__ = "1.0.0"
