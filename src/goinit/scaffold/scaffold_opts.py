"""Options dataclass for the go-init command."""

import os
from dataclasses import dataclass

from goinit.scaffold.scaffold_request import ScaffoldRequest

REST_API_FLAG = "--rest-api"


@dataclass
class ScaffoldOpts:
    """All options for the go-init command."""

    project_name: str
    rest_api: bool = False
    base_dir: str = "."

    @classmethod
    def from_args(cls, project_name, extra_args=(), base_dir="."):
        """Build options from the positional project name and trailing arguments.

        Only an exact ``--rest-api`` token is recognised; anything else is ignored.
        """
        return cls(
            project_name=project_name,
            rest_api=REST_API_FLAG in extra_args,
            base_dir=base_dir,
        )

    def to_request(self):
        return ScaffoldRequest(
            project_name=self.project_name,
            project_dir=os.path.abspath(os.path.join(self.base_dir, self.project_name)),
            is_rest_api=self.rest_api,
        )
