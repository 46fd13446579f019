# passgen_app/core/definitions.py
import string

# Alphabets du générateur
LETTERS = string.ascii_uppercase + string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+\\|[]{};:/?.>"

# Libellés de l'interface
WINDOW_TITLE = "Password Generator"
PASSWORD_PLACEHOLDER = "Generated Password"
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
NUMBERS_LABEL = "Include Numbers"
SYMBOLS_LABEL = "Include Special Characters"
LENGTH_LABEL = "Length: {length}"
COPY_FAILED_MESSAGE = "Could not copy to clipboard."

# Log Event Types
LOG_EVENT_APP_START = "APP_START"
LOG_EVENT_PASSWORD_COPIED = "PASSWORD_COPIED"
LOG_EVENT_COPY_FAILED = "COPY_FAILED"
LOG_EVENT_PASSWORD_CLEARED = "PASSWORD_CLEARED"
LOG_EVENT_SETTINGS_ERROR = "SETTINGS_ERROR"
