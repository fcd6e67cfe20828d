"""Gestion Clinique - point d'entree web (gunicorn : api.index:app)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from gestion_clinique.api.app import create_app

app = create_app()
