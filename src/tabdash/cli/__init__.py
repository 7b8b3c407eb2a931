"""Command line and terminal user interface."""
