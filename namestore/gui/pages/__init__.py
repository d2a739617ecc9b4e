"""pages — widgets hosted by MainWindow."""

from namestore.gui.pages.names import NamesPage

__all__ = ["NamesPage"]
