# passgen_app/gui/generator_widget.py
from PySide6.QtWidgets import (
    QApplication, QWidget, QMainWindow, QVBoxLayout, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QSlider, QCheckBox
)
from PySide6.QtCore import Qt, QTimer, QEvent, Signal
from PySide6.QtGui import QFont
import config
from passgen_app.utils.password_generator import generate_password
from passgen_app.core.app_log import log_event, log_error
from passgen_app.core.definitions import (
    WINDOW_TITLE, PASSWORD_PLACEHOLDER, COPY_LABEL, COPIED_LABEL, NUMBERS_LABEL,
    SYMBOLS_LABEL, LENGTH_LABEL, COPY_FAILED_MESSAGE,
    LOG_EVENT_PASSWORD_COPIED, LOG_EVENT_COPY_FAILED, LOG_EVENT_PASSWORD_CLEARED
)


class PasswordGeneratorWidget(QWidget):
    """
    Générateur de mot de passe : longueur, chiffres, symboles -> mot de passe affiché.
    Le mot de passe est régénéré à chaque changement d'un des trois réglages.
    Backspace (n'importe où dans le widget) vide le champ.
    """
    password_generated = Signal(str)
    password_cleared = Signal()
    copied_changed = Signal(bool)
    copy_failed = Signal(str)

    def __init__(self, parent=None, clipboard=None, rng=None):
        super().__init__(parent)
        self._clipboard = clipboard
        self._rng = rng
        self._password = ""
        self._copied = False
        self._key_targets = []

        # Timer annulable pour le retour de "Copied!" à "Copy"
        self._copied_timer = QTimer(self)
        self._copied_timer.setSingleShot(True)
        self._copied_timer.timeout.connect(self._reset_copied)

        self.setup_ui()
        self.install_key_filter()
        self.regenerate()

    def setup_ui(self):
        self.setObjectName("generator-card")
        self.setAttribute(Qt.WA_StyledBackground, True)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(14)

        title = QLabel(WINDOW_TITLE)
        title.setObjectName("generator-title")
        title.setFont(QFont("Segoe UI", 18, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        # Password field + copy
        pass_layout = QHBoxLayout()
        self.password_input = QLineEdit()
        self.password_input.setReadOnly(True)
        self.password_input.setPlaceholderText(PASSWORD_PLACEHOLDER)
        pass_layout.addWidget(self.password_input)

        self.copy_btn = QPushButton(COPY_LABEL)
        self.copy_btn.setCursor(Qt.PointingHandCursor)
        self.copy_btn.setProperty("copied", False)
        self.copy_btn.clicked.connect(self.copy_to_clipboard)
        pass_layout.addWidget(self.copy_btn)
        layout.addLayout(pass_layout)

        self.status_label = QLabel("")
        self.status_label.setObjectName("status-label")
        layout.addWidget(self.status_label)

        # Length
        length_layout = QHBoxLayout()
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(config.MIN_LENGTH, config.MAX_LENGTH)
        self.length_slider.setValue(config.clamp_length(config.DEFAULT_LENGTH))
        self.length_slider.setCursor(Qt.PointingHandCursor)
        self.length_label = QLabel(LENGTH_LABEL.format(length=self.length_slider.value()))
        length_layout.addWidget(self.length_slider)
        length_layout.addWidget(self.length_label)
        layout.addLayout(length_layout)

        self.numbers_cb = QCheckBox(NUMBERS_LABEL)
        self.numbers_cb.setChecked(bool(config.DEFAULT_NUMBERS_ALLOWED))
        layout.addWidget(self.numbers_cb)

        self.symbols_cb = QCheckBox(SYMBOLS_LABEL)
        self.symbols_cb.setChecked(bool(config.DEFAULT_SYMBOLS_ALLOWED))
        layout.addWidget(self.symbols_cb)

        layout.addStretch()

        # Connexions après l'initialisation des valeurs : une seule génération au départ
        self.length_slider.valueChanged.connect(self._on_length_changed)
        self.numbers_cb.toggled.connect(self.regenerate)
        self.symbols_cb.toggled.connect(self.regenerate)

    # --- State ---

    @property
    def length(self) -> int:
        return self.length_slider.value()

    @property
    def numbers_allowed(self) -> bool:
        return self.numbers_cb.isChecked()

    @property
    def symbols_allowed(self) -> bool:
        return self.symbols_cb.isChecked()

    @property
    def password(self) -> str:
        return self._password

    @property
    def copied(self) -> bool:
        return self._copied

    def set_length(self, length: int):
        # QSlider borne la valeur et n'émet rien si elle ne change pas
        self.length_slider.setValue(length)

    def set_numbers_allowed(self, allowed: bool):
        self.numbers_cb.setChecked(allowed)

    def set_symbols_allowed(self, allowed: bool):
        self.symbols_cb.setChecked(allowed)

    # --- Generation ---

    def _on_length_changed(self, value: int):
        self.length_label.setText(LENGTH_LABEL.format(length=value))
        self.regenerate()

    def regenerate(self):
        pwd = generate_password(self.length, self.numbers_allowed, self.symbols_allowed, rng=self._rng)
        self._set_password(pwd)
        self.password_generated.emit(pwd)
        return pwd

    def _set_password(self, pwd: str):
        self._password = pwd
        self.password_input.setText(pwd)

    def clear_password(self):
        self._set_password("")
        log_event(LOG_EVENT_PASSWORD_CLEARED)
        self.password_cleared.emit()

    # --- Clipboard ---

    def copy_to_clipboard(self):
        self.password_input.selectAll()
        clipboard = self._clipboard if self._clipboard is not None else QApplication.clipboard()
        try:
            clipboard.setText(self._password)
        except Exception as e:
            log_error(LOG_EVENT_COPY_FAILED, str(e))
            self._set_copied(False)
            self.status_label.setText(COPY_FAILED_MESSAGE)
            self._copied_timer.start(config.COPIED_RESET_MS)
            self.copy_failed.emit(str(e))
            return

        log_event(LOG_EVENT_PASSWORD_COPIED, f"length={len(self._password)}")
        self.status_label.setText("")
        self._set_copied(True)
        # Un nouveau clic relance le délai
        self._copied_timer.start(config.COPIED_RESET_MS)

    def _reset_copied(self):
        self.status_label.setText("")
        self._set_copied(False)

    def _set_copied(self, copied: bool):
        changed = copied != self._copied
        self._copied = copied
        self.copy_btn.setText(COPIED_LABEL if copied else COPY_LABEL)
        # Re-polish pour que le QSS [copied="true"] soit pris en compte
        self.copy_btn.setProperty("copied", copied)
        self.copy_btn.style().unpolish(self.copy_btn)
        self.copy_btn.style().polish(self.copy_btn)
        if changed:
            self.copied_changed.emit(copied)

    # --- Keyboard ---

    def install_key_filter(self):
        """Écoute Backspace sur le widget et ses enfants uniquement (pas de filtre global)."""
        if self._key_targets:
            return
        self._key_targets = [self] + self.findChildren(QWidget)
        for target in self._key_targets:
            target.installEventFilter(self)

    def remove_key_filter(self):
        for target in self._key_targets:
            target.removeEventFilter(self)
        self._key_targets = []

    def eventFilter(self, watched, event):
        if event.type() == QEvent.KeyPress and event.key() == Qt.Key_Backspace:
            self.clear_password()
            return True
        return super().eventFilter(watched, event)

    # --- Lifetime ---

    def teardown(self):
        self._copied_timer.stop()
        self._reset_copied()
        self.remove_key_filter()

    def showEvent(self, event):
        # Réinstallé si le widget est ré-affiché après un close()
        self.install_key_filter()
        super().showEvent(event)

    def closeEvent(self, event):
        self.teardown()
        super().closeEvent(event)


class PasswordGeneratorWindow(QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(460)
        self.generator = PasswordGeneratorWidget(self)
        self.setCentralWidget(self.generator)

    def closeEvent(self, event):
        self.generator.teardown()
        super().closeEvent(event)
