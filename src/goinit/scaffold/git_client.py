"""GitClient: wraps GitPython for the two Git operations go-init needs.

Provides an injectable interface so tests can use FakeGitClient
without unittest.mock.patch. This is the only module that imports
GitPython; other modules take ``GitError`` from here.
"""

import os

# GitPython refuses to import without a git executable unless told to stay
# quiet; a missing git must surface as GitCommandNotFound on first use.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import Git, Repo  # noqa: E402
from git.exc import GitError  # noqa: E402, F401


class GitClient:
    """Reads Git configuration and creates repositories.

    When git is absent ``user_email`` returns an empty string and
    ``init_repository`` raises ``GitCommandNotFound`` (a ``GitError``).
    """

    def user_email(self):
        """Return the configured ``user.email``, or an empty string if unset."""
        try:
            return Git().config("--get", "user.email").strip()
        except GitError:
            return ""

    def init_repository(self, path):
        """Create an empty repository in *path* and return its ``.git`` directory."""
        repo = Repo.init(path)
        return repo.git_dir
