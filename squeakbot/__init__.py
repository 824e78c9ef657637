"""Command-dispatch core for an IRC chat bot."""
