"""Acces aux listes d'options depuis l'interface (via l'API REST)."""

import logging
from typing import Mapping, Optional

from gestion_clinique.clients.http_client import ApiClient
from gestion_clinique.config.constants import (
    OptionField, MSG_ERREUR_GENERIQUE, MSG_SAUVEGARDE_OPTIONS,
)
from gestion_clinique.core.exceptions import TransportError
from gestion_clinique.models.options import OptionLists

logger = logging.getLogger("gestion_clinique.clients.options")


class OptionsClient:
    """Chaque accesseur refait un appel complet : pas de cache."""

    def __init__(self, client: ApiClient, defaults: Optional[OptionLists] = None):
        self.client = client
        self._defaults = defaults or OptionLists.defaults()

    def get_all(self) -> OptionLists:
        try:
            data = self.client.get("options")
        except TransportError as e:
            logger.error("Lecture des options impossible: %s", e)
            raise TransportError(MSG_ERREUR_GENERIQUE, status=e.status) from e
        return OptionLists.from_dict(data, self._defaults)

    def get_appointment_types(self) -> list[str]:
        return self.get_all().get(OptionField.APPOINTMENT_TYPES.value)

    def get_bank_names(self) -> list[str]:
        return self.get_all().get(OptionField.BANK_NAMES.value)

    def get_soin_types(self) -> list[str]:
        return self.get_all().get(OptionField.SOIN_TYPES.value)

    def update(self, partial: Mapping[str, list[str]]) -> OptionLists:
        """Transmet une mise a jour partielle ; renvoie les listes fusionnees."""
        try:
            data = self.client.put("options", dict(partial))
        except TransportError as e:
            logger.error("Sauvegarde des options impossible: %s", e)
            raise TransportError(MSG_SAUVEGARDE_OPTIONS, status=e.status) from e
        return OptionLists.from_dict(data, self._defaults)
