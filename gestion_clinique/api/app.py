"""Application FastAPI : listes d'options partagees (banques, types de
rendez-vous, types de soins) stockees dans un fichier JSON.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gestion_clinique import __version__
from gestion_clinique.config.constants import MSG_LECTURE_OPTIONS, MSG_MAJ_OPTIONS
from gestion_clinique.config.settings import AppConfig
from gestion_clinique.core.exceptions import StorageError
from gestion_clinique.models.options import OptionListsUpdate
from gestion_clinique.options.store import OptionsStore

logger = logging.getLogger("gestion_clinique.api")


def get_options_store(request: Request) -> OptionsStore:
    return request.app.state.options_store


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or AppConfig.depuis_env()

    app = FastAPI(
        title="Gestion Clinique",
        description="Listes d'options partagees de la clinique",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.options_store = OptionsStore(config.storage.options_path)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    @app.get("/options")
    def get_options(store: OptionsStore = Depends(get_options_store)):
        try:
            return store.get_options().to_dict()
        except StorageError as e:
            logger.error("GET /options: %s", e)
            return JSONResponse(status_code=500, content={"message": MSG_LECTURE_OPTIONS})

    @app.put("/options")
    def update_options(
        payload: Optional[OptionListsUpdate] = None,
        store: OptionsStore = Depends(get_options_store),
    ):
        try:
            return store.update_options(payload or OptionListsUpdate()).to_dict()
        except StorageError as e:
            logger.error("PUT /options: %s", e)
            return JSONResponse(status_code=500, content={"message": MSG_MAJ_OPTIONS})

    return app


