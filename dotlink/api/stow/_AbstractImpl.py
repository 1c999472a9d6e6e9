"""Abstract base class for package linker implementations."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    """Abstract base class for package linker backends.

    A backend relinks one named package (a directory under the dotfiles
    directory) at a time.
    """

    @abstractmethod
    def relink(self, package: str) -> None:
        """Relink every file of a package.

        Raises:
            ExternalToolMissing: The backend tool is not installed
            ExternalToolInvocationFailed: The backend tool reported an error
        """
        pass
