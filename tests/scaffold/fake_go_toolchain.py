"""FakeGoToolchain: test double for GoToolchain.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

import os
import subprocess


class FakeGoToolchain:
    """Records go invocations and writes a minimal go.mod on mod_init.

    Usage:
        fake = FakeGoToolchain(go_version="1.22")
        fake.mod_init("github.com/alice/demo", cwd="/tmp/demo")
        assert fake.calls == [("mod_init", "github.com/alice/demo", "/tmp/demo")]
    """

    def __init__(self, go_version="1.22", fail_mod_init=False, fail_get=False):
        self._go_version = go_version
        self._fail_mod_init = fail_mod_init
        self._fail_get = fail_get
        self.calls = []

    def mod_init(self, module_name, cwd):
        self.calls.append(("mod_init", module_name, cwd))
        if self._fail_mod_init:
            raise subprocess.CalledProcessError(1, ["go", "mod", "init", module_name])
        with open(os.path.join(cwd, "go.mod"), "w") as f:
            f.write(f"module {module_name}\n")
            if self._go_version:
                f.write(f"\ngo {self._go_version}\n")

    def get(self, package, cwd):
        self.calls.append(("get", package, cwd))
        if self._fail_get:
            raise subprocess.CalledProcessError(1, ["go", "get", package])
