"""Built-in configuration used when no config file exists."""

from typing import Any

from ...constants import DEFAULT_DOTFILES_DIR

_ALL = ["macos", "linux", "windows", "unknown"]


def default_config_dict() -> dict[str, Any]:
    """Default configuration: VSCode everywhere, manual links on Windows, GNU stow elsewhere."""
    return {
        "dotfiles_dir": DEFAULT_DOTFILES_DIR,
        "links": [
            {
                "label": "keybindings.json",
                "source": "vscode/keybindings.json",
                "target": "{vscode_user_dir}/keybindings.json",
                "platforms": list(_ALL),
            },
            {
                "label": "settings.json",
                "source": "vscode/settings.json",
                "target": "{vscode_user_dir}/settings.json",
                "platforms": list(_ALL),
                "optional": True,
            },
            # VsVim reads _vsvimrc (underscore prefix) on Windows
            {
                "label": "_vsvimrc",
                "source": "vsvimrc/.vsvimrc",
                "target": "~/_vsvimrc",
                "platforms": ["windows"],
            },
            {
                "label": ".ideavimrc",
                "source": "ideavimrc/.ideavimrc",
                "target": "~/.ideavimrc",
                "platforms": ["windows"],
            },
            {
                "label": "nvim",
                "source": "nvim/.config/nvim",
                "target": "~/.config/nvim",
                "platforms": ["windows"],
            },
            {
                "label": "tmux",
                "source": "tmux/.config/tmux",
                "target": "~/.config/tmux",
                "platforms": ["windows"],
                "requires_wsl": True,
            },
        ],
        "stow": {
            "type": "stow",
            "platforms": ["macos", "linux", "unknown"],
            "packages": ["nvim", "tmux", "ideavimrc", "vsvimrc"],
            "data": {
                "executable": "stow",
                "flags": ["-R"],
            },
        },
        "link": {
            "relink_mismatched": False,
        },
        "log": {
            "level": "INFO",
        },
    }
