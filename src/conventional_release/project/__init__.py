"""Project file updates."""
