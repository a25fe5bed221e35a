"""Render the starter files of a generated Go project and write them to disk."""

import os
import sys

import click

from goinit.templates.template_renderer import render_template

API_PORT = 8080
HEALTH_PATH = "/api/health"
BUILD_DIR = "bin"

REST_API_FILES = [
    ("api/routes/routes.go", "routes.go.j2"),
    ("api/handlers/handlers.go", "handlers.go.j2"),
    ("api/middleware/middleware.go", "middleware.go.j2"),
]


def entry_point_path(project_name):
    return os.path.join("cmd", project_name, "main.go")


def _context(request, **extra):
    context = {
        "project_name": request.project_name,
        "module_name": request.module_name,
        "identity": request.identity,
        "is_rest_api": request.is_rest_api,
        "port": API_PORT,
        "health_path": HEALTH_PATH,
        "build_dir": BUILD_DIR,
    }
    context.update(extra)
    return context


def _render(template_name, request, **extra):
    return render_template(template_name, package=__package__, **_context(request, **extra))


def write_project_file(project_dir, rel_path, content):
    """Write *content* to *rel_path* beneath *project_dir*.

    Raises:
        SystemExit: If the file cannot be written
    """
    try:
        with open(os.path.join(project_dir, rel_path), "w") as f:
            f.write(content)
    except OSError as e:
        click.echo(f"Error creating {os.path.basename(rel_path)} file: {e}", err=True)
        sys.exit(1)


def write_entry_point(request):
    """Write cmd/<project_name>/main.go for the request's mode."""
    template_name = "rest_main.go.j2" if request.is_rest_api else "main.go.j2"
    write_project_file(
        request.project_dir,
        entry_point_path(request.project_name),
        _render(template_name, request),
    )


def write_rest_api_files(request):
    """Write the routes, handlers and middleware sources of a REST API project.

    The middleware is not registered with the router; projects opt in to it.
    """
    for rel_path, template_name in REST_API_FILES:
        write_project_file(request.project_dir, rel_path, _render(template_name, request))


def write_readme(request, go_version=""):
    write_project_file(request.project_dir, "README.md", _render("README.md.j2", request, go_version=go_version))


def write_gitignore(request):
    write_project_file(request.project_dir, ".gitignore", _render("gitignore.j2", request))


def write_makefile(request):
    write_project_file(request.project_dir, "Makefile", _render("Makefile.j2", request))
