"""GNU stow package linker - runs ``stow -R <package>`` in the dotfiles directory."""

import shutil
import subprocess
from pathlib import Path

from ....utils.get_logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..StowConfig import StowConfig
from ..StowError import ExternalToolInvocationFailed, ExternalToolMissing
from ._Data import _Data

logger = get_logger("stow")


class _Impl(_AbstractImpl):
    """GNU stow implementation."""

    def __init__(self, stow_config: StowConfig, dotfiles_dir: Path):
        if not isinstance(stow_config.data, _Data):
            raise ValueError("GNU stow config data is required")
        self.config = stow_config
        self._data: _Data = stow_config.data
        self.dotfiles_dir = dotfiles_dir

    def _build_command(self, executable: str, package: str) -> list[str]:
        command = [executable, *self._data.flags]
        if self._data.target_dir:
            command += ["-t", str(Path(self._data.target_dir).expanduser())]
        command.append(package)
        return command

    def relink(self, package: str) -> None:
        executable = shutil.which(self._data.executable)
        if not executable:
            raise ExternalToolMissing(self._data.executable)

        command = self._build_command(executable, package)
        logger.info(f"Running {' '.join(command)} in {self.dotfiles_dir}")
        try:
            subprocess.run(
                command,
                cwd=str(self.dotfiles_dir),
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            raise ExternalToolInvocationFailed(package, e.returncode, e.stderr or "") from e
        except OSError as e:
            raise ExternalToolInvocationFailed(package, None, str(e)) from e
