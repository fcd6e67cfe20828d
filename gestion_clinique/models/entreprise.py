"""Modeles du profil entreprise (identite legale de la clinique)."""

from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from dateutil import parser as date_parser

from gestion_clinique.config.constants import ENTREPRISE_IDENTIFIANTS
from gestion_clinique.utils.number_utils import parser_entier

IDENTIFIANTS = tuple(nom for nom, _ in ENTREPRISE_IDENTIFIANTS)

NombreSaisi = Union[int, str, None]


@dataclass
class Entreprise:
    """Profil entreprise tel que renvoye par le serveur."""
    id: int
    ICE: Optional[int] = None
    CNSS: Optional[int] = None
    RC: Optional[int] = None
    IF: Optional[int] = None
    RIB: Optional[int] = None
    patente: Optional[int] = None
    adresse: str = ""
    email: Optional[str] = None
    numero_telephone: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entreprise:
        return cls(
            id=data.get("id"),
            ICE=data.get("ICE"),
            CNSS=data.get("CNSS"),
            RC=data.get("RC"),
            IF=data.get("IF"),
            RIB=data.get("RIB"),
            patente=data.get("patente"),
            adresse=data.get("adresse") or "",
            email=data.get("email"),
            numero_telephone=data.get("numero_telephone"),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def fusionner(self, champs: Mapping[str, Any]) -> Entreprise:
        """Nouvel enregistrement avec les champs fournis ecrasant les actuels."""
        connus = {k: v for k, v in champs.items() if k in self.__dataclass_fields__}
        return replace(self, **connus)

    @property
    def date_creation(self) -> Optional[datetime]:
        if not self.created_at:
            return None
        return date_parser.isoparse(self.created_at)


@dataclass
class EntrepriseFormData:
    """Saisie du formulaire entreprise : les identifiants peuvent etre du texte."""
    ICE: NombreSaisi = None
    CNSS: NombreSaisi = None
    RC: NombreSaisi = None
    IF: NombreSaisi = None
    RIB: NombreSaisi = None
    patente: NombreSaisi = None
    adresse: str = ""
    email: Optional[str] = None
    numero_telephone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntrepriseFormData:
        champs = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**champs)

    def vers_payload(self) -> dict:
        """Convertit la saisie en enregistrement type (identifiants en entiers)."""
        payload = {nom: parser_entier(getattr(self, nom)) for nom in IDENTIFIANTS}
        payload["adresse"] = self.adresse
        payload["email"] = self.email
        payload["numero_telephone"] = self.numero_telephone
        return payload
