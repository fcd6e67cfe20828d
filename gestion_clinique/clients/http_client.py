"""Client HTTP JSON minimal vers l'API de la clinique."""

import json
import logging
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from gestion_clinique.config.constants import (
    MSG_ERREUR_RESEAU, MSG_ERREUR_SERVEUR, MSG_REPONSE_INVALIDE,
)
from gestion_clinique.config.settings import ApiClientConfig
from gestion_clinique.core.exceptions import TransportError

logger = logging.getLogger("gestion_clinique.clients.http")


class ApiClient:
    """Appels REST JSON ; toute erreur remonte en TransportError."""

    def __init__(self, config: Optional[ApiClientConfig] = None):
        self.config = config or ApiClientConfig()
        self.base_url = self.config.base_url.rstrip("/")

    def get(self, endpoint: str) -> Any:
        return self._request("GET", endpoint)

    def post(self, endpoint: str, payload: Any) -> Any:
        return self._request("POST", endpoint, payload)

    def put(self, endpoint: str, payload: Any) -> Any:
        return self._request("PUT", endpoint, payload)

    def patch(self, endpoint: str, payload: Any) -> Any:
        return self._request("PATCH", endpoint, payload)

    def _request(self, method: str, endpoint: str, payload: Any = None) -> Any:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        data = None
        if payload is not None:
            data = json.dumps(payload, ensure_ascii=False).encode("utf-8")

        req = Request(url, data=data, method=method)
        req.add_header("Accept", "application/json")
        if data is not None:
            req.add_header("Content-Type", "application/json")

        logger.debug("%s %s", method, url)
        try:
            with urlopen(req, timeout=self.config.timeout) as resp:
                body = resp.read()
        except HTTPError as e:
            message = _message_serveur(e)
            logger.error("API %s %s : %s - %s", method, endpoint, e.code, message)
            raise TransportError(message or MSG_ERREUR_SERVEUR % e.code, status=e.code) from e
        except (URLError, OSError) as e:
            logger.error("Erreur reseau %s %s: %s", method, url, e)
            raise TransportError(MSG_ERREUR_RESEAU) from e

        if not body or not body.strip():
            return ""
        try:
            return json.loads(body)
        except ValueError as e:
            logger.error("Reponse non JSON pour %s %s", method, endpoint)
            raise TransportError(MSG_REPONSE_INVALIDE) from e


def _message_serveur(erreur: HTTPError) -> Optional[str]:
    """Extrait le champ `message` du corps d'erreur JSON, s'il existe."""
    if erreur.fp is None:
        return None
    try:
        data = json.loads(erreur.read().decode("utf-8", errors="replace"))
    except (OSError, ValueError):
        return None
    if isinstance(data, dict):
        message = data.get("message") or data.get("detail")
        if isinstance(message, str) and message:
            return message
    return None
