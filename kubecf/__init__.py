"""Switch the active kubeconfig by repointing a symlink."""

__version__ = "0.1.0"