"""
Constantes de la clinique : listes d'options par defaut, messages d'erreur,
identifiants legaux de l'entreprise et theme des documents imprimables.
"""

from enum import Enum


# --- Listes d'options ---

class OptionField(str, Enum):
    """Noms des listes d'options (cles JSON)."""
    BANK_NAMES = "bankNames"
    APPOINTMENT_TYPES = "appointmentTypes"
    SOIN_TYPES = "soinTypes"


DEFAULT_BANK_NAMES = (
    "Attijariwafa bank",
    "BMCE Bank of Africa",
    "CIH Bank",
    "Banque Populaire",
    "Société Générale",
    "Crédit du Maroc",
    "BMCI",
    "Bank Al-Maghrib",
)

DEFAULT_APPOINTMENT_TYPES = (
    "Consultation Biohacking",
    "Thérapie IV",
    "Séance de Cryothérapie",
    "Analyse du Bilan Sanguin",
    "Consultation Bien-être",
    "Suivi Post-Traitement",
    "Thérapie par Ondes de Choc",
    "Consultation Nutritionnelle",
    "Examen Médical Complet",
    "Thérapie par la Lumière",
    "Consultation Hormonale",
    "Séance de Récupération",
)

DEFAULT_SOIN_TYPES = (
    "Consultation",
    "Diagnostic",
    "Préventif",
    "Thérapeutique",
    "Chirurgie",
    "Rééducation",
    "Urgence",
    "Suivi",
)

OPTIONS_FILENAME = "options.json"


# --- Messages (affiches tels quels par l'interface) ---

MSG_LECTURE_OPTIONS = "Impossible de lire les options"
MSG_MAJ_OPTIONS = "Impossible de mettre à jour les options"
MSG_SAUVEGARDE_OPTIONS = "Impossible de sauvegarder les options"
MSG_ERREUR_GENERIQUE = "Erreur"
MSG_ERREUR_RESEAU = "Le serveur est injoignable"
MSG_ERREUR_SERVEUR = "Erreur du serveur (HTTP %d)"
MSG_REPONSE_INVALIDE = "Réponse invalide du serveur"


# --- Entreprise ---

# (champ, message si invalide)
ENTREPRISE_IDENTIFIANTS = (
    ("ICE", "L'ICE est obligatoire et doit être un nombre valide"),
    ("CNSS", "Le CNSS est obligatoire et doit être un nombre valide"),
    ("RC", "Le RC est obligatoire et doit être un nombre valide"),
    ("IF", "L'IF est obligatoire et doit être un nombre valide"),
    ("RIB", "Le RIB est obligatoire et doit être un nombre valide"),
    ("patente", "La patente est obligatoire et doit être un nombre valide"),
)

MSG_ADRESSE_OBLIGATOIRE = "L'adresse est obligatoire"

# Ordre d'affichage dans le pied de page des documents
PIED_DE_PAGE_IDENTIFIANTS = (
    ("ICE", "ICE"),
    ("RC", "RC"),
    ("IF", "IF"),
    ("CNSS", "CNSS"),
    ("RIB", "RIB"),
    ("patente", "Patente"),
)


# --- Documents imprimables ---

DEFAULT_LOGO_URL = (
    "https://cdn.builder.io/api/v1/image/assets%2F16493a39c179465f9ca598ede9454dc8"
    "%2Fcceedcfad29a48b9a90d85058157ec8d?format=webp&width=800"
)

# Variables de theme au format HSL "h s% l%"
DEFAULT_THEME = {
    "background": "0 0% 100%",
    "foreground": "222.2 84% 4.9%",
    "primary": "173 80% 32%",
    "primary-foreground": "0 0% 100%",
    "secondary": "210 40% 96.1%",
    "secondary-foreground": "222.2 47.4% 11.2%",
    "muted": "210 40% 96.1%",
    "muted-foreground": "215.4 16.3% 46.9%",
    "accent": "174 60% 92%",
    "accent-foreground": "222.2 47.4% 11.2%",
    "destructive": "0 84.2% 60.2%",
    "destructive-foreground": "210 40% 98%",
    "border": "214.3 31.8% 91.4%",
    "input": "214.3 31.8% 91.4%",
    "ring": "173 80% 32%",
    "card": "0 0% 100%",
    "card-foreground": "222.2 84% 4.9%",
}
