"""Directory layout of a generated Go project."""

import os
import sys

import click

STANDARD_DIRECTORIES = ["configs", "test"]

REST_API_DIRECTORIES = [
    "api",
    "api/handlers",
    "api/middleware",
    "api/routes",
    "web",
    "web/templates",
    "web/static",
    "web/static/css",
    "web/static/js",
    "internal/models",
    "internal/database",
    "configs",
    "test",
]


def project_directories(project_name, is_rest_api):
    """Return the relative directories to create, in creation order."""
    dirs = [f"cmd/{project_name}", "internal", "pkg"]
    if is_rest_api:
        dirs.extend(REST_API_DIRECTORIES)
    else:
        dirs.extend(STANDARD_DIRECTORIES)
    return dirs


def create_project_directories(project_dir, dirs):
    """Create each of *dirs* beneath *project_dir*, parents included.

    Stops at the first failure; directories already created are left in place.

    Raises:
        SystemExit: If a directory cannot be created
    """
    for rel_dir in dirs:
        try:
            os.makedirs(os.path.join(project_dir, rel_dir), exist_ok=True)
        except OSError as e:
            click.echo(f"Error creating directory {rel_dir}: {e}", err=True)
            sys.exit(1)
