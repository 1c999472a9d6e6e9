"""Setup module - plans and runs the full dotfiles provisioning."""
