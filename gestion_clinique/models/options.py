"""Modeles des listes d'options (banques, types de rendez-vous, types de soins)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from gestion_clinique.config.constants import (
    OptionField,
    DEFAULT_BANK_NAMES, DEFAULT_APPOINTMENT_TYPES, DEFAULT_SOIN_TYPES,
)


@dataclass
class OptionLists:
    """Les trois listes alimentant les menus deroulants."""
    bank_names: list[str] = field(default_factory=list)
    appointment_types: list[str] = field(default_factory=list)
    soin_types: list[str] = field(default_factory=list)

    _ATTRIBUTS = {
        OptionField.BANK_NAMES.value: "bank_names",
        OptionField.APPOINTMENT_TYPES.value: "appointment_types",
        OptionField.SOIN_TYPES.value: "soin_types",
    }

    @classmethod
    def defaults(cls) -> OptionLists:
        return cls(
            bank_names=list(DEFAULT_BANK_NAMES),
            appointment_types=list(DEFAULT_APPOINTMENT_TYPES),
            soin_types=list(DEFAULT_SOIN_TYPES),
        )

    @classmethod
    def from_dict(cls, data: Any, defaults: Optional[OptionLists] = None) -> OptionLists:
        """Construit les listes depuis un document JSON.

        Tout champ absent ou qui n'est pas une liste est remplace par la
        liste par defaut correspondante.
        """
        defaults = defaults or cls.defaults()
        if not isinstance(data, Mapping):
            data = {}
        valeurs = {}
        for cle, attr in cls._ATTRIBUTS.items():
            v = data.get(cle)
            valeurs[attr] = list(v) if isinstance(v, list) else list(getattr(defaults, attr))
        return cls(**valeurs)

    def get(self, cle: str) -> list[str]:
        return getattr(self, self._ATTRIBUTS[cle])

    def with_updates(self, updates: Mapping[str, list[str]]) -> OptionLists:
        """Copie ou seuls les champs presents dans `updates` sont remplaces."""
        valeurs = {attr: list(getattr(self, attr)) for attr in self._ATTRIBUTS.values()}
        for cle, liste in updates.items():
            if cle in self._ATTRIBUTS and liste is not None:
                valeurs[self._ATTRIBUTS[cle]] = list(liste)
        return OptionLists(**valeurs)

    def to_dict(self) -> dict[str, list[str]]:
        return {cle: list(getattr(self, attr)) for cle, attr in self._ATTRIBUTS.items()}


def sanitize_option_list(values: Any) -> Optional[list[str]]:
    """Nettoie une liste soumise : trim, suppression des vides, dedoublonnage.

    Le dedoublonnage est sensible a la casse et conserve l'ordre de premiere
    apparition. Retourne None si `values` n'est pas une liste (champ ignore).
    """
    if not isinstance(values, list):
        return None
    resultat: list[str] = []
    vus: set[str] = set()
    for v in values:
        texte = v.strip() if isinstance(v, str) else ""
        if not texte or texte in vus:
            continue
        vus.add(texte)
        resultat.append(texte)
    return resultat


class OptionListsUpdate(BaseModel):
    """Corps d'une mise a jour partielle (PUT /options)."""

    model_config = ConfigDict(extra="ignore")

    bankNames: Optional[Any] = None
    appointmentTypes: Optional[Any] = None
    soinTypes: Optional[Any] = None

    def sanitized(self) -> dict[str, list[str]]:
        """Champs exploitables, nettoyes ; les champs non-listes sont ignores."""
        champs = {}
        for cle in (OptionField.BANK_NAMES, OptionField.APPOINTMENT_TYPES, OptionField.SOIN_TYPES):
            liste = sanitize_option_list(getattr(self, cle.value))
            if liste is not None:
                champs[cle.value] = liste
        return champs
