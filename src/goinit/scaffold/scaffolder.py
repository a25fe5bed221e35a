"""Scaffolder: generates a Go project from a ScaffoldRequest."""

import os
import subprocess
import sys

import click

from goinit.scaffold.files import (
    write_entry_point,
    write_gitignore,
    write_makefile,
    write_readme,
    write_rest_api_files,
)
from goinit.scaffold.git_client import GitError
from goinit.scaffold.go_toolchain import ROUTER_LIBRARY, read_go_version
from goinit.scaffold.identity import resolve_identity
from goinit.scaffold.layout import create_project_directories, project_directories
from goinit.scaffold.prompt import prompt_with_default
from goinit.scaffold.summary import print_summary

BANNER = "Go Project Initializer v1.0"


class Scaffolder:
    """Runs every generation step in order using injected collaborators.

    The first fatal error prints a message and exits with status 1, leaving
    whatever was already written on disk. The process working directory is
    never changed; every step is given ``request.project_dir``.

    Args:
        go_toolchain: Object with ``mod_init(module_name, cwd)`` and
            ``get(package, cwd)``.
        git_client: Object with ``user_email()`` and ``init_repository(path)``.
        prompt_config: PromptConfig used for the username and module prompts.
    """

    def __init__(self, go_toolchain, git_client, prompt_config=None):
        self._go = go_toolchain
        self._git = git_client
        self._prompt_config = prompt_config

    def run(self, request):
        click.echo(BANNER)
        click.echo("-" * 28)
        if request.is_rest_api:
            click.echo("REST API mode enabled")

        self.check_target_absent(request)
        request.identity = resolve_identity(self._git, self._prompt_config)
        self.create_project_dir(request)
        self.init_module(request)
        self.create_structure(request)

        if request.is_rest_api:
            self.create_rest_api_files(request)
        else:
            click.echo("Creating main.go file...")
            write_entry_point(request)

        click.echo("Creating README.md...")
        write_readme(request, read_go_version(request.project_dir))
        click.echo("Creating .gitignore file...")
        write_gitignore(request)
        click.echo("Creating Makefile...")
        write_makefile(request)

        self.init_git_repository(request)
        print_summary(request)

    def check_target_absent(self, request):
        if os.path.lexists(request.project_dir):
            _abort(f'Error: The directory "{request.project_name}" already exists.')

    def create_project_dir(self, request):
        click.echo(f"Creating project directory: {request.project_name}...")
        try:
            os.makedirs(request.project_dir)
        except OSError as e:
            _abort(f"Error creating project directory: {e}")

    def init_module(self, request):
        click.echo("Initializing Go module...")
        default = request.default_module_name
        request.module_name = prompt_with_default(
            f"Module name (default {default}): ", default, config=self._prompt_config,
        )
        try:
            self._go.mod_init(request.module_name, cwd=request.project_dir)
        except (subprocess.CalledProcessError, OSError) as e:
            _abort(f"Error initializing Go module: {e}")

    def create_structure(self, request):
        click.echo("Creating standard Go project structure...")
        dirs = project_directories(request.project_name, request.is_rest_api)
        create_project_directories(request.project_dir, dirs)

    def create_rest_api_files(self, request):
        click.echo("Creating REST API files...")
        write_entry_point(request)
        write_rest_api_files(request)
        try:
            self._go.get(ROUTER_LIBRARY, cwd=request.project_dir)
        except (subprocess.CalledProcessError, OSError) as e:
            click.echo(f"Warning: Unable to add gorilla/mux dependency: {e}", err=True)

    def init_git_repository(self, request):
        click.echo("Initializing Git repository...")
        try:
            git_dir = self._git.init_repository(request.project_dir)
        except (GitError, OSError) as e:
            click.echo(f"Error initializing Git repository: {e}", err=True)
            return
        click.echo(f"Initialized empty Git repository in {git_dir}{os.sep}")


def _abort(message):
    click.echo(message, err=True)
    sys.exit(1)
