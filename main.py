# main.py
import sys
import os
from PySide6.QtWidgets import QApplication
from passgen_app.gui.styles import theme_manager
from passgen_app.gui.generator_widget import PasswordGeneratorWindow
from passgen_app.core.app_log import log_event, log_warning
from passgen_app.core.definitions import LOG_EVENT_APP_START, LOG_EVENT_SETTINGS_ERROR
import config

def log_startup():
    log_event(LOG_EVENT_APP_START, f"theme={config.THEME}")
    if config.SETTINGS_LOAD_ERROR:
        log_warning(LOG_EVENT_SETTINGS_ERROR, config.SETTINGS_LOAD_ERROR)

def main():
    os.makedirs(config.APP_DATA_DIR, exist_ok=True)
    app = QApplication(sys.argv)
    log_startup()

    # Apply saved theme at startup
    theme_manager.apply_theme(getattr(config, 'THEME', 'dark'), app)

    window = PasswordGeneratorWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
