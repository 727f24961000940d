"""PyQt6 presentation layer: board widget, main window and locale strings."""
