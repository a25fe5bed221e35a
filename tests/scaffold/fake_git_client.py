"""FakeGitClient: test double for GitClient."""

import os

from goinit.scaffold.git_client import GitError


class FakeGitClient:
    """Returns a canned user.email and records repository creation.

    init_repository does not touch the filesystem.
    """

    def __init__(self, email="", fail_init=False):
        self._email = email
        self._fail_init = fail_init
        self.calls = []

    def user_email(self):
        self.calls.append(("user_email",))
        return self._email

    def init_repository(self, path):
        self.calls.append(("init_repository", path))
        if self._fail_init:
            raise GitError("git init failed")
        return os.path.join(path, ".git")
