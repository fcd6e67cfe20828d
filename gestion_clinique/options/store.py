"""Stockage partage des listes d'options.

Un seul document JSON contient les trois listes. Les lectures retombent sur
les listes par defaut si le fichier est corrompu ; les ecritures echouent
avec StorageError.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from gestion_clinique.core.exceptions import StorageError
from gestion_clinique.database.json_store import JsonDocumentStore
from gestion_clinique.models.options import OptionLists, OptionListsUpdate

logger = logging.getLogger("gestion_clinique.options")


class OptionsStore:
    """Depot fichier des listes d'options."""

    def __init__(self, path: Path, defaults: Optional[OptionLists] = None):
        self._document = JsonDocumentStore(path)
        self._defaults = defaults or OptionLists.defaults()

    @property
    def path(self) -> Path:
        return self._document.path

    @property
    def defaults(self) -> OptionLists:
        return OptionLists.from_dict(self._defaults.to_dict())

    def initialize_if_absent(self) -> bool:
        """Cree le fichier avec les listes par defaut s'il n'existe pas."""
        if self._document.exists():
            return False
        if not self._document.save_if_absent(self._defaults.to_dict()):
            return False
        logger.info("Options initialisees avec les valeurs par defaut dans %s", self.path)
        return True

    def get_options(self) -> OptionLists:
        """Listes courantes ; initialise le stockage au premier acces."""
        self.initialize_if_absent()
        return self._lire()

    def update_options(self, partial: Mapping[str, Any]) -> OptionLists:
        """Remplace les listes presentes dans `partial` et renvoie le resultat complet.

        Lecture-fusion-ecriture sous verrou exclusif : les champs non fournis
        gardent leur valeur stockee, la derniere ecriture gagne par champ.
        """
        if isinstance(partial, OptionListsUpdate):
            updates = partial.sanitized()
        else:
            updates = OptionListsUpdate.model_validate(dict(partial or {})).sanitized()

        def _fusionner(data):
            return OptionLists.from_dict(data, self._defaults).with_updates(updates).to_dict()

        fusion = OptionLists.from_dict(self._document.update(_fusionner), self._defaults)
        logger.info("Options mises a jour : %s", ", ".join(sorted(updates)) or "aucun champ")
        return fusion

    def reset(self) -> OptionLists:
        """Reecrit les listes par defaut."""
        self._document.save(self._defaults.to_dict())
        return self.defaults

    def _lire(self) -> OptionLists:
        try:
            data = self._document.load()
        except StorageError as e:
            logger.warning("Options illisibles, valeurs par defaut utilisees: %s", e)
            return self.defaults
        return OptionLists.from_dict(data, self._defaults)
