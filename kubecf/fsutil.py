"""File-system helpers: symlink handling, backup naming and home directory lookup."""

from __future__ import annotations

import os
import stat
import sys
import time
from collections.abc import Mapping

_MAX_BACKUP_ATTEMPTS = 999


def is_symlink(path: str | os.PathLike[str]) -> bool:
    """Return True if *path* itself is a symbolic link."""
    return os.path.islink(path)


def generate_backup_name(base_path: str, suffix: str) -> str:
    """Return the first free name among ``base+suffix``, ``base-1+suffix``, ...

    Raises FileExistsError when too many revisions already exist.
    """
    for index in range(_MAX_BACKUP_ATTEMPTS):
        candidate = f"{base_path}{suffix}" if index == 0 else f"{base_path}-{index}{suffix}"
        try:
            os.lstat(candidate)
        except FileNotFoundError:
            return candidate
    raise FileExistsError("Too many backup revisions of this file")


def backup_file(file_path: str) -> str:
    """Move *file_path* aside to ``<file_path>-backup[-n]`` and return the new path."""
    backup_path = generate_backup_name(f"{file_path}-backup", "")
    os.rename(file_path, backup_path)
    return backup_path


def create_symlink(target: str, link_path: str) -> None:
    """Make *link_path* a symbolic link to *target*.

    An existing symlink at *link_path* is replaced; any other existing file is
    backed up first. After replacing, the link's times are refreshed so tools
    that watch modification times notice the switch.
    """
    try:
        current = os.lstat(link_path)
    except FileNotFoundError:
        os.symlink(target, link_path)
        return

    if stat.S_ISLNK(current.st_mode):
        os.remove(link_path)
    else:
        backup_file(link_path)

    os.symlink(target, link_path)
    now = time.time()
    os.utime(link_path, (now, now))


def home_dir(environ: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Return the current user's home directory.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH and USERPROFILE holding a
    ``.kube/config`` file wins; failing that, the first of HOME, USERPROFILE,
    HOMEDRIVE+HOMEPATH that is a writeable directory, then the first that
    exists, then the first that is set. Elsewhere HOME is returned.
    """
    env = os.environ if environ is None else environ
    plat = sys.platform if platform is None else platform

    if not plat.startswith("win"):
        return env.get("HOME", "")

    home = env.get("HOME", "")
    drive, drive_path = env.get("HOMEDRIVE", ""), env.get("HOMEPATH", "")
    drive_home = drive + drive_path if drive and drive_path else ""
    user_profile = env.get("USERPROFILE", "")

    for path in (home, drive_home, user_profile):
        if path and os.path.exists(os.path.join(path, ".kube", "config")):
            return path

    first_set = ""
    first_existing = ""
    for path in (home, user_profile, drive_home):
        if not path:
            continue
        first_set = first_set or path
        try:
            info = os.stat(path)
        except OSError:
            continue
        first_existing = first_existing or path
        if stat.S_ISDIR(info.st_mode) and stat.S_IMODE(info.st_mode) & stat.S_IWUSR:
            return path

    return first_existing or first_set