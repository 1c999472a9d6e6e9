"""PackageLinker public API - relinks named packages through a backend tool."""

from pathlib import Path

from ..platform.PlatformTag import PlatformTag
from ._AbstractImpl import _AbstractImpl
from .StowConfig import _BACKEND_REGISTRY, StowConfig

# Shown when the backend tool is missing
_INSTALL_HINTS: dict[PlatformTag, str] = {
    PlatformTag.MACOS: "Install with: brew install stow",
    PlatformTag.LINUX: "Install with: sudo apt install stow  (or your package manager)",
}


class PackageLinker:
    """Public API for package linker operations."""

    def __init__(self, stow_config: StowConfig, dotfiles_dir: Path):
        self.stow_config = stow_config
        self.dotfiles_dir = dotfiles_dir
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def install_hint(tag: PlatformTag) -> str:
        """How to install the package linker on a platform, empty string if unknown."""
        return _INSTALL_HINTS.get(tag, "")

    def __enter__(self):
        backend_type = self.stow_config.type
        if backend_type not in _BACKEND_REGISTRY:
            supported = list(_BACKEND_REGISTRY.keys())
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {supported})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"dotlink.api.stow._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.stow_config, self.dotfiles_dir)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def relink(self, package: str) -> None:
        """Relink a package.

        Raises:
            ExternalToolMissing: The backend tool is not installed
            ExternalToolInvocationFailed: The backend tool reported an error
        """
        if not self._impl:
            raise RuntimeError("PackageLinker not initialized. Use as context manager first.")
        self._impl.relink(package)
