"""Line prompts with a default value, reading from an injectable input source."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO


@dataclass
class PromptConfig:
    """I/O configuration for interactive prompts.

    Prompt text is written to ``output``; ``input_fn`` only reads the answer.
    """

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def _read_line(prompt_text, config):
    print(prompt_text, end="", file=config.output, flush=True)
    try:
        return config.input_fn("")
    except EOFError:
        print("", file=config.output)
        return ""


def prompt_with_default(prompt_text, default, *, config=None):
    """Ask for a single line and return it, or *default* when left blank.

    End of input counts as a blank answer.

    Args:
        prompt_text: Text shown before the cursor, including any default hint.
        default: Value returned for blank input.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        The stripped answer, or *default*.
    """
    if config is None:
        config = PromptConfig()

    answer = _read_line(prompt_text, config).strip()
    return answer or default
