"""Discovery of kubeconfig files in a directory."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from kubecf.settings import NAME_GROUP


@dataclass(frozen=True)
class Candidate:
    """A kubeconfig file that can be switched to."""

    name: str
    full_path: str

    def title(self) -> str:
        return self.name

    def description(self) -> str:
        return "Path: " + self.full_path

    def filter_value(self) -> str:
        return self.name


def list_candidates_in_dir(directory: str, pattern: str | re.Pattern[str]) -> list[Candidate]:
    """Return the files in *directory* whose names match *pattern*, sorted by file name.

    The candidate's name is the ``name`` group of the match, or the whole match
    when the pattern has no such group. A pattern without any group matches
    nothing.
    """
    regex = re.compile(pattern)
    group_index = regex.groupindex.get(NAME_GROUP, 0)

    with os.scandir(directory) as entries:
        files = sorted(
            (entry.name for entry in entries if not entry.is_dir(follow_symlinks=False))
        )

    found = []
    for filename in files:
        match = regex.search(filename)
        if match is None or regex.groups < 1:
            continue
        found.append(
            Candidate(
                name=match.group(group_index) or "",
                full_path=os.path.abspath(os.path.join(directory, filename)),
            )
        )
    return found