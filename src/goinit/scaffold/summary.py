"""Closing report: the generated layout as a tree plus how to run the project."""

import click

from goinit.scaffold.files import API_PORT, HEALTH_PATH


def _tree_lines(project_name, is_rest_api):
    lines = [
        f"- {project_name}/",
        "  |- cmd/",
        f"  |  \\- {project_name}/ (application entrypoints)",
        "  |     \\- main.go",
        "  |- internal/ (private code)",
    ]
    if is_rest_api:
        lines += [
            "  |  |- models/ (data models)",
            "  |  \\- database/ (database connections)",
        ]
    lines.append("  |- pkg/ (public code)")
    if is_rest_api:
        lines += [
            "  |- api/ (API definitions)",
            "  |  |- handlers/ (request handlers)",
            "  |  |- middleware/ (HTTP middleware)",
            "  |  \\- routes/ (route definitions)",
            "  |- web/ (web assets)",
            "  |  |- templates/ (HTML templates)",
            "  |  \\- static/ (static assets)",
            "  |     |- css/ (stylesheets)",
            "  |     \\- js/ (javascript files)",
        ]
    lines += [
        "  |- configs/ (configuration files)",
        "  |- test/ (test files)",
        "  |- README.md",
        "  |- .gitignore",
        "  |- Makefile",
        "  \\- go.mod",
    ]
    return lines


def _next_steps(project_name, is_rest_api):
    base_url = f"http://localhost:{API_PORT}"
    lines = [
        "To run your REST API:" if is_rest_api else "To run your project:",
        f"  cd {project_name}",
        f"  go run cmd/{project_name}/main.go",
    ]
    if is_rest_api:
        lines += [
            "",
            f"Your API will be available at: {base_url}",
            f"Health check endpoint: {base_url}{HEALTH_PATH}",
        ]
    return lines


def summary_lines(request):
    """Return the full summary for *request* as a list of lines."""
    return (
        ["", f"Successfully created Go project: {request.project_name}", "", "Project structure:"]
        + _tree_lines(request.project_name, request.is_rest_api)
        + [""]
        + _next_steps(request.project_name, request.is_rest_api)
        + ["", "Happy coding!"]
    )


def print_summary(request):
    for line in summary_lines(request):
        click.echo(line)
