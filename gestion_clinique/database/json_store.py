"""Document JSON unique persiste sur disque.

Compatible multi-worker Gunicorn via file locking : lectures sous verrou
partage, ecritures sous verrou exclusif sur un fichier `.lock` voisin.
Chaque ecriture passe par un fichier temporaire unique puis os.replace.
"""

import fcntl
import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Optional

from gestion_clinique.core.exceptions import StorageError

logger = logging.getLogger("gestion_clinique.database")


class JsonDocumentStore:
    """Lecture/ecriture d'un document JSON."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.lock_path = self.path.with_suffix(".lock")

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Any:
        """Lit le document. Leve StorageError si illisible ou mal forme."""
        with self._verrou(fcntl.LOCK_SH):
            return self._lire()

    def save(self, data: Any) -> None:
        """Ecriture atomique du document complet."""
        with self._verrou(fcntl.LOCK_EX):
            self._ecrire(data)

    def save_if_absent(self, data: Any) -> bool:
        """Ecrit `data` seulement si le document n'existe pas encore."""
        with self._verrou(fcntl.LOCK_EX):
            if self.path.exists():
                return False
            self._ecrire(data)
            return True

    def update(self, fonction: Callable[[Optional[Any]], Any]) -> Any:
        """Lecture-modification-ecriture sous verrou exclusif.

        `fonction` recoit le document courant (None s'il est absent ou
        illisible) et renvoie le document a ecrire, qui est aussi renvoye.
        """
        with self._verrou(fcntl.LOCK_EX):
            data = None
            if self.path.exists():
                try:
                    data = self._lire()
                except StorageError as e:
                    logger.warning("Document illisible, il sera remplace: %s", e)
            nouveau = fonction(data)
            self._ecrire(nouveau)
            return nouveau

    @contextmanager
    def _verrou(self, mode: int):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            lf = open(self.lock_path, "a+")
        except OSError as e:
            logger.error("Verrou impossible sur %s: %s", self.lock_path, e)
            raise StorageError(f"Verrou impossible sur {self.lock_path}: {e}") from e
        with lf:
            fcntl.flock(lf, mode)
            try:
                yield
            finally:
                fcntl.flock(lf, fcntl.LOCK_UN)

    def _lire(self) -> Any:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Lecture impossible de {self.path}: {e}") from e

    def _ecrire(self, data: Any) -> None:
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=self.path.stem + ".", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, str(self.path))
        except (OSError, TypeError, ValueError) as e:
            logger.error("Ecriture impossible de %s: %s", self.path, e)
            raise StorageError(f"Ecriture impossible de {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
