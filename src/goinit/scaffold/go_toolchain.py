"""GoToolchain: runs the go command inside a generated project."""

import os
import re
import subprocess

ROUTER_LIBRARY = "github.com/gorilla/mux"

_GO_DIRECTIVE = re.compile(r"^go[ \t]+([^\s/]+)[ \t]*(?://.*)?$", re.MULTILINE)


class GoToolchain:
    """Invokes ``go`` with the caller's standard streams attached.

    Both methods raise ``subprocess.CalledProcessError`` on a non-zero exit
    and ``FileNotFoundError`` when the executable is missing.
    """

    def __init__(self, executable="go"):
        self._executable = executable

    def mod_init(self, module_name, cwd):
        """Create ``go.mod`` for *module_name* in *cwd*."""
        subprocess.run([self._executable, "mod", "init", module_name], cwd=cwd, check=True)

    def get(self, package, cwd):
        """Add *package* as a dependency of the module in *cwd*."""
        subprocess.run([self._executable, "get", package], cwd=cwd, check=True)


def read_go_version(project_dir):
    """Return the version from the ``go`` directive of *project_dir*/go.mod.

    Returns an empty string when go.mod is missing or has no such directive.
    """
    go_mod = os.path.join(project_dir, "go.mod")
    if not os.path.isfile(go_mod):
        return ""
    with open(go_mod) as f:
        match = _GO_DIRECTIVE.search(f.read())
    return match.group(1) if match else ""
