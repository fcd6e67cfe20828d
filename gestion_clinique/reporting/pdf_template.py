"""Gabarit HTML des documents imprimables (factures, documents patients).

Produit un document HTML autonome (CSS en ligne, format A4) destine a
l'impression en PDF. En-tete et pied de page reprennent le profil
entreprise ; toute donnee qui y est inseree est echappee. Le contenu du
corps est fourni par l'appelant et insere tel quel.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from jinja2 import Environment
from markupsafe import Markup, escape

from gestion_clinique.config.constants import (
    DEFAULT_LOGO_URL, DEFAULT_THEME, PIED_DE_PAGE_IDENTIFIANTS,
)
from gestion_clinique.models.entreprise import Entreprise

logger = logging.getLogger("gestion_clinique.reporting")

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

_HEADER = _env.from_string("""
  <div class="pdf-header">
    <div class="pdf-logo"><img src="{{ logo_url }}" alt="Logo" /></div>
    <div class="pdf-title-block">
      {% if title %}<div class="pdf-title">{{ title }}</div>{% endif %}
      {% if subtitle %}<div class="pdf-subtitle">{{ subtitle }}</div>{% endif %}
    </div>
    <div class="pdf-company-lines">{% for ligne in lignes %}{{ ligne }}{% if not loop.last %}<br>{% endif %}{% endfor %}</div>
  </div>""")

_FOOTER = _env.from_string("""
  <div class="pdf-footer">
    {% if adresse %}<div>{{ adresse }}</div>{% endif %}
    {% if contacts %}<div>{{ contacts | join(" ") }}</div>{% endif %}
    {% if details %}<small>{{ details | join(" • ") }}</small>{% endif %}
  </div>""")

_DOCUMENT = _env.from_string(
    '<!DOCTYPE html><html><head><meta charset="UTF-8"><title>{{ title }}</title>'
    "<style>{{ styles }}</style></head><body>"
    '<div class="pdf-container">{{ content }}</div></body></html>'
)

_THEME_VARIABLES = tuple(DEFAULT_THEME)

_BASE_RULES = """
  *{margin:0;padding:0;box-sizing:border-box}
  body{font-family:'Segoe UI',Tahoma,Geneva,Verdana,sans-serif;font-size:12px;line-height:1.5;color:hsl(var(--pdf-foreground));background:white;padding:20px}
  .pdf-container{max-width:800px;margin:0 auto;background:white}
  .pdf-header{display:flex;justify-content:space-between;align-items:center;border-bottom:3px solid hsl(var(--pdf-primary));padding-bottom:16px;margin-bottom:24px}
  .pdf-brand{display:flex;align-items:center;gap:12px}.pdf-title-block{text-align:center;flex:1}
  .pdf-logo{display:block}
  .pdf-logo img{display:block;max-height:60px;width:auto;height:auto;object-fit:contain}
  .pdf-company-lines{font-size:11px;color:hsl(var(--pdf-muted-foreground));text-align:right;max-width:40%}
  .pdf-title{font-size:24px;font-weight:700;color:hsl(var(--pdf-primary))}
  .pdf-subtitle{font-size:12px;color:hsl(var(--pdf-muted-foreground))}
  .pdf-section{margin-bottom:20px}
  .pdf-card{background:hsl(var(--pdf-muted));padding:16px;border-radius:8px}
  .pdf-section-title{font-weight:700;font-size:14px;color:hsl(var(--pdf-primary));margin-bottom:8px;border-bottom:1px solid hsl(var(--pdf-border));padding-bottom:6px}
  .pdf-grid{display:grid;gap:24px}
  .pdf-grid-2{grid-template-columns:1fr 1fr}
  .pdf-row{display:flex;justify-content:space-between;margin-bottom:6px}
  .pdf-label{color:hsl(var(--pdf-muted-foreground));font-weight:600}
  .pdf-value{font-weight:600}
  .pdf-table{width:100%;border-collapse:collapse;margin-bottom:20px;border:1px solid hsl(var(--pdf-border))}
  .pdf-table th{background:hsl(var(--pdf-primary));color:hsl(var(--pdf-primary-foreground));font-weight:600;padding:10px 8px;text-align:left;font-size:11px;text-transform:uppercase}
  .pdf-table td{padding:10px 8px;border-bottom:1px solid hsl(var(--pdf-border));vertical-align:top}
  .pdf-table tbody tr:nth-child(even){background:hsl(var(--pdf-muted))}
  .pdf-amount{font-family:'Courier New',monospace;text-align:right;font-weight:700}
  .pdf-totals{margin-top:12px;border-top:2px solid hsl(var(--pdf-border));padding-top:12px}
  .pdf-totals-table{width:100%;max-width:420px;margin-left:auto}
  .pdf-totals-table td{padding:8px 12px;border-bottom:1px solid hsl(var(--pdf-border))}
  .pdf-totals-label{text-align:left;font-weight:600;color:hsl(var(--pdf-muted-foreground))}
  .pdf-totals-final{background:hsl(var(--pdf-accent));border-top:2px solid hsl(var(--pdf-primary));font-size:16px;font-weight:700;color:hsl(var(--pdf-primary))}
  .pdf-note{margin-top:16px;padding:14px;background:hsl(var(--pdf-muted));border-left:4px solid hsl(var(--pdf-primary));border-radius:6px}
  .pdf-footer{margin-top:28px;text-align:center;color:hsl(var(--pdf-muted-foreground));font-size:10px;border-top:1px solid hsl(var(--pdf-border));padding-top:12px}
  .pdf-footer small{display:block;margin-top:6px}
  @page{size:A4;margin:12mm}
  @media print{body{padding:0;background:white}.pdf-container{box-shadow:none;padding-bottom:120px}.pdf-footer{position:fixed;bottom:12mm;left:0;right:0;margin:0 auto;max-width:800px;background:transparent;border-top:1px solid hsl(var(--pdf-border));padding-top:8px}}
  """

# Theme courant ; lu a chaque generation de styles
_theme_actif: dict = dict(DEFAULT_THEME)


def escape_html(value) -> str:
    """Echappe &, <, >, guillemets et apostrophes."""
    return str(escape(value))


def set_pdf_theme(theme: Mapping[str, str]) -> None:
    """Remplace les variables de theme utilisees par les prochains documents."""
    _theme_actif.clear()
    _theme_actif.update(DEFAULT_THEME)
    _theme_actif.update({k: v for k, v in theme.items() if k in DEFAULT_THEME})


def get_pdf_css_variables(theme: Optional[Mapping[str, str]] = None) -> str:
    """Bloc :root figeant les couleurs du theme en variables --pdf-*."""
    valeurs = dict(_theme_actif)
    if theme:
        valeurs.update(theme)
    declarations = "".join(f"--pdf-{nom}:{valeurs.get(nom, '')};" for nom in _THEME_VARIABLES)
    return ":root{" + declarations + "}"


def build_pdf_base_styles(theme: Optional[Mapping[str, str]] = None) -> str:
    return "\n  " + get_pdf_css_variables(theme) + _BASE_RULES


def build_company_header_html(
    entreprise: Optional[Entreprise],
    logo_url: Optional[str] = None,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
) -> str:
    lignes = []
    if entreprise is not None:
        if entreprise.adresse:
            lignes.append(entreprise.adresse)
        if entreprise.numero_telephone:
            lignes.append(f"Tél: {entreprise.numero_telephone}")
        if entreprise.email:
            lignes.append(f"Email: {entreprise.email}")
    return _HEADER.render(
        logo_url=logo_url or DEFAULT_LOGO_URL,
        title=title,
        subtitle=subtitle,
        lignes=lignes,
    )


def build_company_footer_html(entreprise: Optional[Entreprise]) -> str:
    if entreprise is None:
        return _FOOTER.render(adresse=None, contacts=[], details=[])
    contacts = []
    if entreprise.numero_telephone:
        contacts.append(f"Tél: {entreprise.numero_telephone}")
    if entreprise.email:
        contacts.append(f"Email: {entreprise.email}")
    details = [
        f"{libelle}: {getattr(entreprise, champ)}"
        for champ, libelle in PIED_DE_PAGE_IDENTIFIANTS
        if getattr(entreprise, champ) is not None
    ]
    return _FOOTER.render(adresse=entreprise.adresse, contacts=contacts, details=details)


def wrap_pdf_html_document(
    title: str, content_html: str, extra_styles: Optional[str] = None,
) -> str:
    """Document HTML complet. `content_html` doit deja etre echappe par l'appelant."""
    styles = build_pdf_base_styles() + (extra_styles or "")
    return _DOCUMENT.render(title=title, styles=Markup(styles), content=Markup(content_html))


def generer_document(
    chemin_sortie: Path,
    entreprise: Optional[Entreprise],
    titre: str,
    contenu_html: str = "",
    sous_titre: Optional[str] = None,
    logo_url: Optional[str] = None,
) -> Path:
    """Assemble en-tete, contenu et pied de page puis ecrit le document."""
    html = wrap_pdf_html_document(
        titre,
        build_company_header_html(entreprise, logo_url=logo_url, title=titre, subtitle=sous_titre)
        + contenu_html
        + build_company_footer_html(entreprise),
    )
    chemin_sortie.parent.mkdir(parents=True, exist_ok=True)
    with open(chemin_sortie, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("Document genere : %s", chemin_sortie)
    return chemin_sortie
