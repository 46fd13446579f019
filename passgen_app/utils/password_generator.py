# passgen_app/utils/password_generator.py
import random
from passgen_app.core.definitions import LETTERS, DIGITS, SYMBOLS

def build_alphabet(numbers_allowed: bool = False, symbols_allowed: bool = False) -> str:
    alphabet = LETTERS
    if numbers_allowed: alphabet += DIGITS
    if symbols_allowed: alphabet += SYMBOLS
    return alphabet

def generate_password(length: int, numbers_allowed: bool = False, symbols_allowed: bool = False, rng=None) -> str:
    """
    Tire `length` caractères uniformément (avec remise) dans l'alphabet.
    Pas de garantie cryptographique. `rng` doit exposer `choice` (ex: random.Random).
    """
    if length < 0: raise ValueError("Length must be >= 0")
    rng = rng or random.SystemRandom()
    alphabet = build_alphabet(numbers_allowed, symbols_allowed)
    return ''.join(rng.choice(alphabet) for _ in range(length))
