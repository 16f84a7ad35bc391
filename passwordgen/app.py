# -*- coding: utf-8 -*-
"""
Password Generator desktop app (PyQt5).

A thin window over GeneratorViewModel: every widget change is forwarded to
the view model and every state change is rendered back. Preferences persist
via QSettings; the generated password itself is never stored.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from .constants import APP_NAME, APP_ORG, APP_TITLE, MAX_LENGTH, MAX_SCORE, MIN_LENGTH
from .models import GenerationError, StrengthTier
from .settings import PreferencesStore
from .viewmodel import GeneratorState, GeneratorViewModel

logger = logging.getLogger(__name__)

STRENGTH_COLORS = {
    StrengthTier.VERY_WEAK: "#d32f2f",  # red
    StrengthTier.WEAK: "#f57c00",  # orange
    StrengthTier.MEDIUM: "#fbc02d",  # yellow
    StrengthTier.STRONG: "#388e3c",  # green
    StrengthTier.VERY_STRONG: "#2e7d32",  # darker green
}


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Generator window.

    - Policy panel (length, character sets, exclusions)
    - Output panel (editable password, strength meter)
    """

    def __init__(self, view_model: Optional[GeneratorViewModel] = None) -> None:
        super().__init__()

        if view_model is None:
            view_model = GeneratorViewModel(PreferencesStore(QtCore.QSettings(APP_ORG, APP_NAME)))
        self.vm = view_model

        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(640, 420)

        self._apply_global_styles()
        self._build_ui()

        self.vm.add_state_listener(self._render)
        self.vm.add_error_listener(self._show_error)
        self._render(self.vm.state)

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        layout = QtWidgets.QHBoxLayout(central)
        layout.addWidget(self._build_config_panel(), stretch=2)
        layout.addWidget(self._build_output_panel(), stretch=3)

        self._build_menu_bar()

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

    def _build_config_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Password Policy")
        layout = QtWidgets.QVBoxLayout(group)

        # Length row
        length_row = QtWidgets.QHBoxLayout()
        self.length_spin = QtWidgets.QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)

        self.length_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)

        length_row.addWidget(QtWidgets.QLabel("Length:"))
        length_row.addWidget(self.length_spin)
        length_row.addWidget(self.length_slider)
        layout.addLayout(length_row)

        # Character sets
        self.lower_cb = QtWidgets.QCheckBox("Lowercase (a–z)")
        self.upper_cb = QtWidgets.QCheckBox("Uppercase (A–Z)")
        self.digits_cb = QtWidgets.QCheckBox("Digits (0–9)")
        self.symbols_cb = QtWidgets.QCheckBox("Symbols (!@#$...)")

        # Options
        self.exclude_similar_cb = QtWidgets.QCheckBox("Exclude similar characters (i, I, l, 1, o, O, 0)")
        self.no_repeat_cb = QtWidgets.QCheckBox("Avoid repeated characters in a password")

        bindings = (
            (self.lower_cb, self.vm.set_lowercase),
            (self.upper_cb, self.vm.set_uppercase),
            (self.digits_cb, self.vm.set_digits),
            (self.symbols_cb, self.vm.set_symbols),
            (self.exclude_similar_cb, self.vm.set_exclude_similar),
            (self.no_repeat_cb, self.vm.set_exclude_duplicates),
        )
        for cb, setter in bindings:
            layout.addWidget(cb)
            cb.toggled.connect(setter)

        layout.addStretch(1)

        self.length_spin.valueChanged.connect(self.vm.set_length)
        self.length_slider.valueChanged.connect(self.vm.set_length)

        return group

    def _build_output_panel(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Password")
        layout = QtWidgets.QVBoxLayout(group)

        mono_font = QtGui.QFont("Consolas")
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)

        # Editable: typed passwords are scored too.
        self.password_edit = QtWidgets.QLineEdit()
        self.password_edit.setFont(mono_font)
        self.password_edit.setPlaceholderText("Click “Generate” or type a password to check it.")
        self.password_edit.textEdited.connect(self.vm.set_password)
        layout.addWidget(self.password_edit)

        btn_row = QtWidgets.QHBoxLayout()
        self.generate_btn = QtWidgets.QPushButton("Generate")
        self.copy_btn = QtWidgets.QPushButton("Copy")
        btn_row.addWidget(self.generate_btn)
        btn_row.addWidget(self.copy_btn)
        layout.addLayout(btn_row)

        strength_row = QtWidgets.QHBoxLayout()
        self.strength_bar = QtWidgets.QProgressBar()
        self.strength_bar.setRange(0, MAX_SCORE)
        self.strength_bar.setTextVisible(True)
        self.strength_label = QtWidgets.QLabel("Strength: N/A")
        strength_row.addWidget(self.strength_bar, stretch=3)
        strength_row.addWidget(self.strength_label, stretch=2)
        layout.addLayout(strength_row)

        layout.addStretch(1)

        self.generate_btn.clicked.connect(self.on_generate_clicked)
        self.copy_btn.clicked.connect(self.on_copy_clicked)

        return group

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        generate_action = QtWidgets.QAction("&Generate", self)
        generate_action.setShortcut("Ctrl+G")
        generate_action.triggered.connect(self.on_generate_clicked)
        file_menu.addAction(generate_action)

        exit_action = QtWidgets.QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menubar.addMenu("&Help")
        about_action = QtWidgets.QAction("&About", self)
        about_action.triggered.connect(self.show_about_dialog)
        help_menu.addAction(about_action)

    # ---------- STYLES ----------

    def _apply_global_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow { background-color: #202124; }

            QGroupBox {
                color: #ffffff;
                font-weight: 600;
                border: 1px solid #444;
                border-radius: 8px;
                margin-top: 10px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 8px;
                padding: 0 4px;
            }

            QLabel { color: #e8eaed; }

            QLineEdit {
                background-color: #303134;
                color: #e8eaed;
                border-radius: 4px;
                padding: 4px;
                border: 1px solid #555;
            }

            QSpinBox, QSlider, QCheckBox, QMenuBar, QMenu, QStatusBar {
                color: #e8eaed;
                background-color: #202124;
            }

            QPushButton {
                background-color: #1a73e8;
                color: #ffffff;
                border-radius: 4px;
                padding: 6px 12px;
                border: 1px solid #1a73e8;
            }
            QPushButton:hover { background-color: #4285f4; }
            QPushButton:pressed { background-color: #3367d6; }
            """
        )

    def _set_strength_bar_style(self, tier: StrengthTier) -> None:
        self.strength_bar.setStyleSheet(
            f"""
            QProgressBar {{
                border: 1px solid #555;
                border-radius: 4px;
                text-align: center;
                background-color: #303134;
                color: #e8eaed;
            }}
            QProgressBar::chunk {{
                border-radius: 4px;
                margin: 0px;
                background-color: {STRENGTH_COLORS[tier]};
            }}
            """
        )

    # ---------- RENDERING ----------

    def _render(self, state: GeneratorState) -> None:
        widgets = (
            self.length_spin,
            self.length_slider,
            self.lower_cb,
            self.upper_cb,
            self.digits_cb,
            self.symbols_cb,
            self.exclude_similar_cb,
            self.no_repeat_cb,
        )
        # Don't echo programmatic updates back into the view model.
        for w in widgets:
            w.blockSignals(True)
        try:
            self.length_spin.setValue(state.length)
            self.length_slider.setValue(state.length)
            self.lower_cb.setChecked(state.use_lowercase)
            self.upper_cb.setChecked(state.use_uppercase)
            self.digits_cb.setChecked(state.use_digits)
            self.symbols_cb.setChecked(state.use_symbols)
            self.exclude_similar_cb.setChecked(state.exclude_similar)
            self.no_repeat_cb.setChecked(state.exclude_duplicates)
        finally:
            for w in widgets:
                w.blockSignals(False)

        if self.password_edit.text() != state.password:
            self.password_edit.setText(state.password)

        tier = state.strength
        self.strength_bar.setValue(state.strength_score)
        self.strength_bar.setFormat(f"{state.strength_score} / {MAX_SCORE}")
        self.strength_label.setText(f"Strength: {tier.label}")
        self._set_strength_bar_style(tier)

    # ---------- ACTIONS ----------

    def on_generate_clicked(self) -> None:
        if self.vm.generate() is None:
            self.status_bar.showMessage("Generated a new password.", 5000)

    def _show_error(self, reason: GenerationError, message: str) -> None:
        QtWidgets.QMessageBox.warning(self, "Cannot generate password", message)
        self.status_bar.showMessage(message, 8000)

    def on_copy_clicked(self) -> None:
        pwd = self.password_edit.text()
        if not pwd:
            self.status_bar.showMessage("No password to copy.", 5000)
            return

        QtWidgets.QApplication.clipboard().setText(pwd)
        self.status_bar.showMessage("Password copied to clipboard.", 5000)

    def show_about_dialog(self) -> None:
        QtWidgets.QMessageBox.information(
            self,
            f"About {APP_TITLE}",
            (
                f"{APP_TITLE}\n\n"
                "• Cryptographically secure randomness (SystemRandom)\n"
                "• At least one character from each selected set\n"
                "• Optional exclusion of repeated and look-alike characters\n"
                "• Strength score for generated or typed passwords\n\n"
                "Recommendation: store generated passwords in a reputable password manager."
            ),
        )


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI friendliness (must be set before app creation)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
