"""Profil entreprise cote client.

Le service garde en memoire le dernier enregistrement connu. C'est ce cache,
et lui seul, qui decide entre creation et mise a jour lors d'une sauvegarde.
"""

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from gestion_clinique.clients.http_client import ApiClient
from gestion_clinique.config.constants import (
    ENTREPRISE_IDENTIFIANTS, MSG_ADRESSE_OBLIGATOIRE, MSG_REPONSE_INVALIDE,
)
from gestion_clinique.core.exceptions import (
    GestionCliniqueError, TransportError, ValidationError,
)
from gestion_clinique.models.entreprise import Entreprise, EntrepriseFormData
from gestion_clinique.utils.number_utils import est_entier_positif

logger = logging.getLogger("gestion_clinique.clients.entreprise")

Saisie = Union[EntrepriseFormData, Mapping[str, Any]]


class EntrepriseCache:
    """Cache d'un seul enregistrement, propre a une session."""

    def __init__(self):
        self._current: Optional[Entreprise] = None

    @property
    def current(self) -> Optional[Entreprise]:
        return self._current

    @property
    def is_empty(self) -> bool:
        return self._current is None

    def store(self, entreprise: Entreprise) -> Entreprise:
        self._current = entreprise
        return entreprise

    def reset(self) -> None:
        self._current = None


def validate_entreprise_data(data: Saisie) -> list[str]:
    """Liste des erreurs de saisie ; vide si le formulaire est valide."""
    form = _vers_formulaire(data)
    errors = []
    for nom, message in ENTREPRISE_IDENTIFIANTS:
        if not est_entier_positif(getattr(form, nom)):
            errors.append(message)
    if not (form.adresse or "").strip():
        errors.append(MSG_ADRESSE_OBLIGATOIRE)
    return errors


class EntrepriseService:
    """Lecture, creation et mise a jour du profil entreprise."""

    def __init__(self, client: ApiClient, cache: Optional[EntrepriseCache] = None):
        self.client = client
        self.cache = cache if cache is not None else EntrepriseCache()

    def get_entreprise(self) -> Optional[Entreprise]:
        """Profil distant, ou None si le serveur n'en a pas encore."""
        try:
            data = self.client.get("entreprise")
        except TransportError as e:
            raise _erreur(e) from e
        if data == "" or data is None:
            return None
        if not isinstance(data, Mapping):
            logger.error("Profil entreprise inattendu: %r", data)
            raise TransportError(MSG_REPONSE_INVALIDE)
        return self.cache.store(Entreprise.from_dict(data))

    def create_entreprise(self, data: Saisie) -> Entreprise:
        payload = _vers_formulaire(data).vers_payload()
        try:
            result = self.client.post("entreprise/", payload)
        except TransportError as e:
            raise _erreur(e) from e
        entreprise = Entreprise(
            id=result.get("id") if isinstance(result, dict) else None,
            created_at=datetime.now().isoformat(),
        ).fusionner(payload)
        logger.info("Entreprise creee (id=%s)", entreprise.id)
        return self.cache.store(entreprise)

    def update_entreprise(self, data: Saisie) -> Entreprise:
        courante = self.cache.current
        if courante is None:
            raise GestionCliniqueError("Aucune entreprise chargee a mettre a jour")
        payload = _vers_formulaire(data).vers_payload()
        try:
            self.client.patch(f"entreprise/{courante.id}", payload)
        except TransportError as e:
            raise _erreur(e) from e
        logger.info("Entreprise mise a jour (id=%s)", courante.id)
        return self.cache.store(courante.fusionner(payload))

    def save_entreprise(self, data: Saisie) -> Entreprise:
        # Cache vide => creation, meme si un profil existe deja cote serveur.
        if not self.cache.is_empty:
            return self.update_entreprise(data)
        return self.create_entreprise(data)

    def validate_entreprise_data(self, data: Saisie) -> list[str]:
        return validate_entreprise_data(data)

    def ensure_valid(self, data: Saisie) -> None:
        errors = validate_entreprise_data(data)
        if errors:
            raise ValidationError(errors)


def _vers_formulaire(data: Saisie) -> EntrepriseFormData:
    if isinstance(data, EntrepriseFormData):
        return data
    return EntrepriseFormData.from_dict(data)


def _erreur(e: TransportError) -> TransportError:
    logger.error("Appel entreprise en echec: %s", e.message)
    return TransportError(f"Erreur: {e.message}", status=e.status)
