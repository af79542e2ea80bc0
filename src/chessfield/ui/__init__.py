"""PyQt6 front end: board widget, main window and application bootstrap."""
