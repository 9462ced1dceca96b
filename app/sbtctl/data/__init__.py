"""Bundled resources copied into workspaces."""
