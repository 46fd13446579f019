import os
from PySide6.QtWidgets import QApplication

BASE_DIR = os.path.dirname(__file__)
THEMES = ('dark', 'light')

def _load_qss(path: str) -> str:
    if os.path.exists(path):
        with open(path, 'r') as f:
            return f.read()
    return ""

def build_stylesheet(theme: str) -> str:
    """Concatène base.qss et la feuille du thème ('dark' par défaut si inconnu)."""
    if theme not in THEMES:
        theme = 'dark'
    qss = _load_qss(os.path.join(BASE_DIR, 'base.qss'))
    qss += _load_qss(os.path.join(BASE_DIR, f'{theme}_theme.qss'))
    return qss

def apply_theme(theme: str, app_or_widget=None):
    """Applique le thème spécifié sur l'application ou le widget donné.
    theme: 'dark' or 'light'
    """
    if app_or_widget is None:
        app_or_widget = QApplication.instance()
    if app_or_widget:
        app_or_widget.setStyleSheet(build_stylesheet(theme))
