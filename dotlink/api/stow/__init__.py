"""Stow module - delegation of whole packages to an external symlink manager."""
