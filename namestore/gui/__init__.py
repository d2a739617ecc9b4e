"""
gui — PyQt6 front-end for the names application.

Public API
──────────
MainWindow            — top-level application window
viewmodels            — pure-Python observable state containers
pages                 — individual pages
"""

from namestore.gui.main_window import MainWindow
from namestore.gui import viewmodels

__all__ = ["MainWindow", "viewmodels"]
