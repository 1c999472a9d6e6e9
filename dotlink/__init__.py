"""dotlink - dotfiles symlink provisioning."""
