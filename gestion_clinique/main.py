"""Point d'entree CLI pour Gestion Clinique.

Usage :
    python -m gestion_clinique options
    python -m gestion_clinique options-reset
    python -m gestion_clinique apercu document.html [--titre TITRE] [--sans-entreprise]
    python -m gestion_clinique serve [--host HOST] [--port PORT]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import uvicorn

from gestion_clinique.api.app import create_app
from gestion_clinique.clients.entreprise_service import EntrepriseService
from gestion_clinique.clients.http_client import ApiClient
from gestion_clinique.config.settings import AppConfig
from gestion_clinique.core.exceptions import GestionCliniqueError, TransportError
from gestion_clinique.options.store import OptionsStore
from gestion_clinique.reporting.pdf_template import generer_document, set_pdf_theme


def configurer_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure le logging de l'application."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def creer_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gestion_clinique",
        description="Administration des options de la clinique et documents imprimables.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Mode verbeux (debug)",
    )
    sub = parser.add_subparsers(dest="commande", required=True)

    sub.add_parser("options", help="Affiche les listes d'options stockees")
    sub.add_parser("options-reset", help="Restaure les listes d'options par defaut")

    apercu = sub.add_parser("apercu", help="Genere un document HTML d'exemple")
    apercu.add_argument("sortie", type=Path, help="Fichier HTML a ecrire")
    apercu.add_argument("--titre", default="Document Médical", help="Titre du document")
    apercu.add_argument("--sous-titre", default=None, help="Sous-titre du document")
    apercu.add_argument(
        "--sans-entreprise",
        action="store_true",
        help="Ne pas interroger l'API pour le profil entreprise",
    )

    serve = sub.add_parser("serve", help="Lance le serveur API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Point d'entree principal."""
    parser = creer_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig.depuis_env()
    except GestionCliniqueError as e:
        print(f"Configuration invalide : {e}", file=sys.stderr)
        return 1

    configurer_logging(args.verbose, config.log_level)
    logger = logging.getLogger("gestion_clinique")

    try:
        if args.commande == "options":
            store = OptionsStore(config.storage.options_path)
            print(json.dumps(store.get_options().to_dict(), ensure_ascii=False, indent=2))
        elif args.commande == "options-reset":
            store = OptionsStore(config.storage.options_path)
            store.reset()
            logger.info("Options restaurees dans %s", store.path)
        elif args.commande == "apercu":
            return _apercu(args, config, logger)
        elif args.commande == "serve":
            return _serve(args, config)
        return 0

    except GestionCliniqueError as e:
        logger.error("Erreur : %s", e)
        return 1
    except Exception as e:
        logger.exception("Erreur inattendue : %s", e)
        return 2


def _apercu(args, config: AppConfig, logger: logging.Logger) -> int:
    entreprise = None
    if not args.sans_entreprise:
        service = EntrepriseService(ApiClient(config.api))
        try:
            entreprise = service.get_entreprise()
        except TransportError as e:
            logger.warning("Profil entreprise indisponible (%s), document sans en-tete", e)

    set_pdf_theme(config.pdf.theme)
    chemin = generer_document(
        args.sortie,
        entreprise,
        titre=args.titre,
        sous_titre=args.sous_titre,
        logo_url=config.pdf.logo_url,
    )
    print(f"Document : {chemin}")
    return 0


def _serve(args, config: AppConfig) -> int:
    uvicorn.run(
        create_app(config),
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
