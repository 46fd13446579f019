import os
import json

# --- Chemins de l'application ---
APP_DATA_DIR = os.getenv("PASSGEN_DATA_DIR", os.path.join(os.path.expanduser("~"), ".passgen"))
SETTINGS_FILE = os.path.join(APP_DATA_DIR, "settings.json")
LOG_FILE = os.path.join(APP_DATA_DIR, "passgen.log")

# --- Générateur ---
MIN_LENGTH = 6
MAX_LENGTH = 100
DEFAULT_LENGTH = 8
DEFAULT_NUMBERS_ALLOWED = False
DEFAULT_SYMBOLS_ALLOWED = False

# Durée d'affichage de "Copied!" (ms)
COPIED_RESET_MS = 2000

# --- Apparence ---
THEME = os.getenv("PASSGEN_THEME", "dark")

# --- Journalisation ---
LOG_LEVEL = os.getenv("PASSGEN_LOG_LEVEL", "INFO")

# Message d'erreur si settings.json est illisible (journalisé au démarrage)
SETTINGS_LOAD_ERROR = None


def clamp_length(value: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(value)))


def load_settings(path: str = None):
    """Charge la configuration utilisateur depuis le fichier JSON si existant.

    Un fichier absent laisse les valeurs par défaut. Un fichier illisible ou
    une valeur du mauvais type aussi : rien n'est appliqué et l'erreur est
    conservée dans SETTINGS_LOAD_ERROR.
    """
    global THEME, DEFAULT_LENGTH, DEFAULT_NUMBERS_ALLOWED, DEFAULT_SYMBOLS_ALLOWED, SETTINGS_LOAD_ERROR
    path = path or SETTINGS_FILE
    SETTINGS_LOAD_ERROR = None
    if not os.path.exists(path):
        return
    try:
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings.json must contain an object")

        theme = data.get("theme", THEME)
        length = data.get("default_length", DEFAULT_LENGTH)
        numbers = data.get("numbers_allowed", DEFAULT_NUMBERS_ALLOWED)
        symbols = data.get("symbols_allowed", DEFAULT_SYMBOLS_ALLOWED)
        # bool est une sous-classe de int
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"default_length must be an integer, got {length!r}")
        if not isinstance(numbers, bool):
            raise ValueError(f"numbers_allowed must be true or false, got {numbers!r}")
        if not isinstance(symbols, bool):
            raise ValueError(f"symbols_allowed must be true or false, got {symbols!r}")
    except (OSError, ValueError) as e:
        SETTINGS_LOAD_ERROR = f"{path}: {e}"
        return

    # Tout est valide : application en une fois
    if theme in ("dark", "light"):
        THEME = theme
    DEFAULT_LENGTH = clamp_length(length)
    DEFAULT_NUMBERS_ALLOWED = numbers
    DEFAULT_SYMBOLS_ALLOWED = symbols

load_settings()
