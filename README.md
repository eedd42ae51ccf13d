# kubecf

`kubecf` is a small terminal tool for switching between kubeconfig files. Your
kubeconfig path (`$KUBECONFIG`, or `~/.kube/config` by default) becomes a
symlink, and switching means pointing that symlink at another file.

## Installation

```
pip install .
```

This installs the `kubectl-cf` command. Since it is on your `PATH`, kubectl
also picks it up as a plugin: `kubectl cf`.

## Usage

Choose from a list of the kubeconfig files it finds:

```
kubectl-cf
```

A dialog lists the files with their paths; the file the symlink points to now
is preselected. Pick one and confirm with OK to switch, or choose Cancel to
leave without changing anything. If no files are found, the question is printed
and the command exits.

Switch straight to a file by name, or by a prefix of its name:

```
kubectl-cf staging
```

If exactly one file matches, the symlink is updated. If the prefix matches
several files, their names are listed and nothing changes. An exact name match
always wins over prefix matches. If nothing matches, a message says so.

Go back to the kubeconfig you used before:

```
kubectl-cf -
```

More than one argument is refused with a message. `kubectl-cf -h` prints the
usage text.

### First run

If the kubeconfig path is a regular file and not a symlink, `kubectl-cf` asks
whether to move it to `default-kubeconfig.yaml` in the same directory and put a
symlink in its place. Answer `y` to accept, `n` to cancel, or `q` to leave. If
that name is taken, `default-kubeconfig-1.yaml`, `default-kubeconfig-2.yaml`
and so on are tried instead. If the kubeconfig path does not exist yet, an
empty symlink is created there.

Whenever a symlink replaces something that is not a symlink, the old file is
first moved aside to `<path>-backup` (or `<path>-backup-1`, `-2`, ...).

## Which files are listed

By default, the directory of the file the symlink currently points to is
searched (the current working directory if the symlink is empty). Directories
are skipped, and files are listed in order of file name. A file is listed if
its name is `config` or ends in `.yaml` and has no other dot, such as
`prod.yaml`. The name shown is taken from the `name` group of the pattern, or
is the whole match if the pattern has no such group. The kubeconfig symlink
itself is left out of the list.

## Environment variables

| Variable | Meaning |
| --- | --- |
| `KUBECONFIG` | Path of the kubeconfig symlink (default `~/.kube/config`). |
| `KUBECTL_CF_PATHS` | Colon-separated directories to search. `@kubeconfig-dir` stands for the directory of the current kubeconfig, which is also the default. |
| `KUBECTL_CF_KUBECONFIG_MATCH_PATTERN` | Regular expression that file names must match. A group named `name` sets the name shown. |
| `KUBECTL_CF_CONFIG_DIR` | Where `kubectl-cf` keeps its own state (default `~/.kube/kubectl-cf`). |
| `LOG_LEVEL` | Log level: `panic`, `fatal`, `error`, `warn`, `warning`, `info`, `debug` or `trace` (default `warn`). |
| `NO_COLOR` | Set it to turn off coloured output. `CLICOLOR=0` does the same unless `CLICOLOR_FORCE` is set; `CLICOLOR_FORCE` forces colour on. |

Colour is otherwise used only when output goes to a terminal whose `TERM` is
not `dumb`.

The previously used kubeconfig is recorded in the file `previous` inside the
config directory each time the symlink is switched. `kubectl-cf -` reads it
from there.

## Using it from Python

The pieces behind the command can be used directly:

- `kubecf.settings.Settings.from_environ()` reads the settings above.
- `kubecf.candidates.list_candidates_in_dir(directory, pattern)` returns the
  matching files as `Candidate` objects with `name` and `full_path`.
- `kubecf.switcher.Switcher` holds the switching logic: `start(argument)`,
  `answer_rename(answer)`, `select(candidate)`, `switch_to(target)` and
  `view()`.
- `kubecf.fsutil` provides `create_symlink`, `backup_file` and
  `generate_backup_name`.

## Limitations

The file list has no type-to-filter search and no paging; all found files are
shown in one dialog. Files are only found in the configured directories, not in
their subdirectories.