"""Interactive kubeconfig switcher: state machine and command entry point."""

from __future__ import annotations

import argparse
import enum
import logging
import os
import sys
from collections.abc import Sequence

from kubecf.candidates import Candidate, list_candidates_in_dir
from kubecf.fsutil import create_symlink, generate_backup_name
from kubecf.logsetup import configure_logger
from kubecf.messages import t
from kubecf.settings import (
    DEFAULT_KUBECONFIG_BASE_NAME,
    KUBECONFIG_DIR_SPECIAL_PATH,
    Settings,
)
from kubecf.style import make_fg_style

logger = logging.getLogger("kubecf")


class Mode(enum.Enum):
    """What the switcher is currently doing."""

    SELECT = enum.auto()
    ASK_RENAME = enum.auto()
    QUIT = enum.auto()


def _dirname(path: str) -> str:
    return os.path.dirname(path) or "."


class Switcher:
    """Switches the kubeconfig symlink between kubeconfig files."""

    def __init__(self, settings: Settings | None = None, *, color: bool | None = None) -> None:
        self.settings = Settings.from_environ() if settings is None else settings
        self.mode = Mode.SELECT
        self.candidates: list[Candidate] = []
        self.current_kubeconfig_path = ""
        self.kubeconfig_path_suggestion = ""
        self.farewell = ""
        self._warning = make_fg_style("1", color)
        self._info = make_fg_style("28", color)
        self._text = make_fg_style("255", color)

    def _quit(self, farewell: str) -> None:
        if not farewell.endswith("\n"):
            farewell += "\n"
        self.mode = Mode.QUIT
        self.farewell = farewell

    def switch_to(self, target: str) -> str:
        """Point the kubeconfig symlink at *target*; return the message to show."""
        kubeconfig_path = self.settings.kubeconfig_path
        try:
            with open(self.settings.previous_path, "w", encoding="utf-8") as handle:
                handle.write(self.current_kubeconfig_path)
        except OSError as err:
            return self._warning(t("updatePreviousKubeconfigError", str(err)))
        try:
            create_symlink(target, kubeconfig_path)
        except OSError as err:
            return self._warning(t("createSymlinkError", str(err)))
        return self._text(
            t("symlinkNowPointTo", self._info(kubeconfig_path), self._info(target))
        )

    def refresh_candidates(self) -> list[Candidate]:
        """Re-read the candidate list from the configured directories.

        Raises OSError when a directory cannot be read.
        """
        found = []
        for directory in self.settings.kubeconfig_dir_paths:
            if directory == KUBECONFIG_DIR_SPECIAL_PATH:
                directory = _dirname(self.current_kubeconfig_path)
            found.extend(
                candidate
                for candidate in list_candidates_in_dir(directory, self.settings.filename_pattern)
                if candidate.full_path != self.settings.kubeconfig_path
            )
        self.candidates = found
        return found

    def focused_index(self) -> int | None:
        """Index of the candidate the symlink currently points to, if listed."""
        focused = None
        for index, candidate in enumerate(self.candidates):
            if candidate.full_path == self.current_kubeconfig_path:
                focused = index
        return focused

    def _refresh_or_quit(self) -> bool:
        try:
            self.refresh_candidates()
        except OSError as err:
            self._quit(self._warning(t("unableToRefreshCandidates", str(err))))
            return False
        return True

    def start(self, argument: str | None = None) -> Mode:
        """Inspect the kubeconfig and, if *argument* is given, switch right away."""
        kubeconfig_path = self.settings.kubeconfig_path
        try:
            info = os.lstat(kubeconfig_path)
        except FileNotFoundError:
            create_symlink("", kubeconfig_path)
            self.mode = Mode.SELECT
            logger.info("The kubeconfig not exist, created an empty symlink: %s", kubeconfig_path)
        else:
            if os.path.islink(kubeconfig_path):
                self.mode = Mode.SELECT
                self.current_kubeconfig_path = os.readlink(kubeconfig_path)
            else:
                del info
                logger.info("The kubeconfig is not a symlink, need to ask user for confirmation")
                self.kubeconfig_path_suggestion = generate_backup_name(
                    os.path.join(self.settings.kubeconfig_dir, DEFAULT_KUBECONFIG_BASE_NAME),
                    ".yaml",
                )
                self.mode = Mode.ASK_RENAME
                return self.mode

        if not self._refresh_or_quit():
            return self.mode

        if not argument:
            return self.mode

        if argument == "-":
            try:
                with open(self.settings.previous_path, encoding="utf-8") as handle:
                    previous = handle.read()
            except FileNotFoundError:
                self._quit(self._warning(t("noPreviousKubeconfig")))
                return self.mode
            self._quit(self.switch_to(previous))
            return self.mode

        guesses: list[Candidate] = []
        for candidate in self.candidates:
            if candidate.name == argument:
                guesses = [candidate]
                break
            if candidate.name.startswith(argument):
                guesses.append(candidate)

        if not guesses:
            self._quit(self._warning(t("noMatchFound", argument)))
        elif len(guesses) == 1:
            self._quit(self.switch_to(guesses[0].full_path))
        else:
            names = ", ".join(g.name for g in guesses)
            self._quit(self._warning(t("moreThanOneMatchesFound", argument, names)))
        return self.mode

    def answer_rename(self, answer: str) -> Mode:
        """Handle the reply to the move-and-symlink question ("y" or "n")."""
        if self.mode is not Mode.ASK_RENAME:
            return self.mode
        kubeconfig_path = self.settings.kubeconfig_path
        if answer in ("y", "Y"):
            suggestion = self.kubeconfig_path_suggestion
            try:
                os.rename(kubeconfig_path, suggestion)
            except OSError as err:
                self._quit(self._warning(t("renameKubeconfigError", str(err))))
                return self.mode
            try:
                create_symlink(suggestion, kubeconfig_path)
            except OSError as err:
                self._quit(self._warning(t("createSymlinkError", str(err))))
                return self.mode
            self.current_kubeconfig_path = suggestion
            if self._refresh_or_quit():
                self.mode = Mode.SELECT
        elif answer in ("n", "N"):
            self._quit(t("renameKubeconfigCanceled"))
        return self.mode

    def select(self, candidate: Candidate) -> Mode:
        """Switch to the chosen *candidate* and finish."""
        if self.mode is not Mode.SELECT:
            return self.mode
        self._quit(self.switch_to(candidate.full_path))
        return self.mode

    def view(self) -> str:
        """Text describing the current state."""
        if self.mode is Mode.ASK_RENAME:
            return t(
                "notASymlinkDoYouWantToMoveIt",
                self._info(self.settings.kubeconfig_path),
                self._info(self.kubeconfig_path_suggestion),
            )
        if self.mode is Mode.QUIT:
            return self.farewell
        focused = self.focused_index()
        lines = [t("whatKubeconfig"), ""]
        for index, candidate in enumerate(self.candidates):
            marker = ">" if index == (focused or 0) else " "
            lines.append(f"{marker} {candidate.title()}")
            lines.append(f"  {candidate.description()}")
        return "\n".join(lines) + "\n"


def _run_interactive(switcher: Switcher) -> int:
    from prompt_toolkit import prompt
    from prompt_toolkit.shortcuts import radiolist_dialog

    while True:
        if switcher.mode is Mode.QUIT:
            sys.stdout.write(switcher.farewell)
            return 0
        if switcher.mode is Mode.ASK_RENAME:
            try:
                answer = prompt(switcher.view() + " ")
            except (KeyboardInterrupt, EOFError):
                return 0
            answer = answer.strip()
            if answer in ("q", "Q"):
                return 0
            switcher.answer_rename(answer)
            continue
        if not switcher.candidates:
            sys.stdout.write(t("whatKubeconfig") + "\n")
            return 0
        values = [
            (candidate, f"{candidate.title()}  ({candidate.description()})")
            for candidate in switcher.candidates
        ]
        options = {}
        focused = switcher.focused_index()
        if focused is not None:
            options["default"] = switcher.candidates[focused]
        chosen = radiolist_dialog(title=t("whatKubeconfig"), values=values, **options).run()
        if chosen is None:
            return 0
        switcher.select(chosen)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    configure_logger()
    parser = argparse.ArgumentParser(
        prog="kubectl-cf",
        usage=argparse.SUPPRESS,
        description=t("cfUsage"),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("kubeconfig", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    settings = Settings.from_environ()
    settings.ensure_dirs()
    switcher = Switcher(settings)

    if len(args.kubeconfig) > 1:
        switcher._quit(t("wrongNumberOfArgumentExpect", 1))
        sys.stdout.write(switcher.farewell)
        return 0

    switcher.start(args.kubeconfig[0] if args.kubeconfig else None)
    return _run_interactive(switcher)


if __name__ == "__main__":
    sys.exit(main())