"""User-facing message catalogue."""

from __future__ import annotations

_MESSAGES: dict[str, str] = {
    "cfUsage": (
        "Usage: kubectl cf [kubeconfig | -]\n\n"
        "Switch the kubeconfig symlink to another kubeconfig file.\n"
        "  kubectl cf          choose a kubeconfig interactively\n"
        "  kubectl cf NAME     switch to the kubeconfig named NAME (a unique prefix is enough)\n"
        "  kubectl cf -        switch back to the previous kubeconfig\n"
    ),
    "whatKubeconfig": "Which kubeconfig do you want to use?",
    "wrongNumberOfArgumentExpect": "Wrong number of arguments, expect at most %d",
    "updatePreviousKubeconfigError": "Unable to record previous kubeconfig: %s",
    "createSymlinkError": "Unable to create symlink: %s",
    "symlinkNowPointTo": "Kubeconfig %s now points to %s",
    "unableToRefreshCandidates": "Unable to list kubeconfig files: %s",
    "noPreviousKubeconfig": "There is no previous kubeconfig to switch back to",
    "noMatchFound": "No kubeconfig matches %s",
    "moreThanOneMatchesFound": "More than one kubeconfig matches %s: %s",
    "renameKubeconfigError": "Unable to move kubeconfig: %s",
    "renameKubeconfigCanceled": "Canceled, nothing was changed",
    "notASymlinkDoYouWantToMoveIt": (
        "%s is not a symlink. Move it to %s and replace it with a symlink? [y/n]"
    ),
}


def t(message_id: str, *args: object) -> str:
    """Return the message *message_id* formatted with *args*; KeyError if unknown."""
    template = _MESSAGES[message_id]
    return template % args if args else template