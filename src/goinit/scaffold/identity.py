"""Resolve the username used in the default Go module path."""

from goinit.scaffold.prompt import prompt_with_default
from goinit.scaffold.scaffold_request import DEFAULT_IDENTITY


def identity_from_email(email):
    """Return the local part of *email* (everything before the first ``@``)."""
    return email.strip().split("@", 1)[0]


def resolve_identity(git_client, prompt_config=None):
    """Derive the identity from Git's ``user.email``, prompting when unavailable.

    Args:
        git_client: Object with a ``user_email()`` method.
        prompt_config: PromptConfig for the fallback prompt.

    Returns:
        The e-mail local part, the entered username, or ``github-user``.
    """
    identity = identity_from_email(git_client.user_email())
    if identity:
        return identity

    return prompt_with_default(
        f"GitHub username (default: {DEFAULT_IDENTITY}): ",
        DEFAULT_IDENTITY,
        config=prompt_config,
    )
