"""Board dialogs."""
