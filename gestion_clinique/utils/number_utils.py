"""Utilitaires pour la saisie des nombres dans les formulaires."""

import re
from typing import Optional, Union

_ENTIER_EN_TETE = re.compile(r"\s*([+-]?\d+)")


def parser_entier(valeur: Union[int, float, str, None]) -> Optional[int]:
    """Parse un entier a la maniere d'un champ de saisie.

    Les espaces de tete sont ignores et seuls les chiffres de tete comptent
    ("12abc" -> 12). Retourne None si aucun chiffre n'est lisible.
    """
    if valeur is None or isinstance(valeur, bool):
        return None
    if isinstance(valeur, int):
        return valeur
    if isinstance(valeur, float):
        if valeur != valeur or valeur in (float("inf"), float("-inf")):
            return None
        return int(valeur)
    m = _ENTIER_EN_TETE.match(str(valeur))
    if not m:
        return None
    return int(m.group(1))


def est_entier_positif(valeur: Union[int, float, str, None]) -> bool:
    """Vrai si la valeur est renseignee et se lit comme un entier strictement positif."""
    if valeur is None or valeur == "":
        return False
    n = parser_entier(valeur)
    return n is not None and n > 0
