"""Runtime settings derived from the environment."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from kubecf.fsutil import home_dir

DEFAULT_KUBECONFIG_BASE_NAME = "default-kubeconfig"
KUBECONFIG_DIR_SPECIAL_PATH = "@kubeconfig-dir"
DEFAULT_FILENAME_PATTERN = r"^(?P<name>(config)|([^\.]+\.yaml))$"
NAME_GROUP = "name"
PREVIOUS_FILE_NAME = "previous"

logger = logging.getLogger("kubecf")


def _dirname(path: str) -> str:
    return os.path.dirname(path) or "."


@dataclass(frozen=True)
class Settings:
    """Locations and patterns the switcher works with."""

    home_dir: str
    kube_dir: str
    config_dir: str
    previous_path: str
    kubeconfig_dir_paths: tuple[str, ...]
    kubeconfig_path: str
    kubeconfig_dir: str
    filename_pattern: re.Pattern[str]

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None, home: str | None = None
    ) -> Settings:
        """Build settings from *environ* (os.environ by default).

        Raises re.error if KUBECTL_CF_KUBECONFIG_MATCH_PATTERN is not a valid pattern.
        """
        env = os.environ if environ is None else environ
        home_path = home_dir(env) if home is None else home
        kube_dir = os.path.join(home_path, ".kube")

        config_dir = env.get("KUBECTL_CF_CONFIG_DIR", "") or os.path.join(kube_dir, "kubectl-cf")
        dir_paths = tuple(p for p in env.get("KUBECTL_CF_PATHS", "").split(":") if p)
        kubeconfig_path = env.get("KUBECONFIG", "") or os.path.join(kube_dir, "config")
        pattern = env.get("KUBECTL_CF_KUBECONFIG_MATCH_PATTERN", "") or DEFAULT_FILENAME_PATTERN

        return cls(
            home_dir=home_path,
            kube_dir=kube_dir,
            config_dir=config_dir,
            previous_path=os.path.join(config_dir, PREVIOUS_FILE_NAME),
            kubeconfig_dir_paths=dir_paths or (KUBECONFIG_DIR_SPECIAL_PATH,),
            kubeconfig_path=kubeconfig_path,
            kubeconfig_dir=_dirname(kubeconfig_path),
            filename_pattern=re.compile(pattern),
        )

    def ensure_dirs(self) -> None:
        """Create the kube directory (best effort) and the config directory."""
        try:
            os.makedirs(self.kube_dir, mode=0o755, exist_ok=True)
        except OSError:
            pass
        try:
            os.lstat(self.config_dir)
        except FileNotFoundError:
            logger.debug("Default config dir %s not exist, creating", self.config_dir)
            os.mkdir(self.config_dir, 0o755)