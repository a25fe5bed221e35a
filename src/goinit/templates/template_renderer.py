"""Load and render the Jinja2 templates that make up a generated project."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "main.go.j2")
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables. Every variable a template references
            must be supplied.

    Returns:
        The rendered file content, trailing newline preserved.

    Raises:
        FileNotFoundError: If the template does not exist.
        jinja2.UndefinedError: If the template references a missing variable.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    template = jinja2.Template(
        source,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    return template.render(**kwargs)
