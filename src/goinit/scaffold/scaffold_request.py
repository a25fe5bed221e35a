"""ScaffoldRequest: the inputs driving one project generation run."""

from dataclasses import dataclass

DEFAULT_IDENTITY = "github-user"
MODULE_HOST = "github.com"


@dataclass
class ScaffoldRequest:
    """Mutable record filled in as the run progresses.

    ``identity`` is resolved first, ``module_name`` after it; both are empty
    until their step has run.
    """

    project_name: str
    project_dir: str
    is_rest_api: bool = False
    identity: str = ""
    module_name: str = ""

    @property
    def default_module_name(self):
        return f"{MODULE_HOST}/{self.identity}/{self.project_name}"
