"""Confirmation Prompt"""

from typing import Callable

from aicommit.output import bold, dim, rule

AFFIRMATIVE = {"y", "yes"}
QUESTION = "Do you want to commit with this message? (y/n): "


def is_affirmative(answer: str) -> bool:
    """Only 'y' or 'yes' (any case, surrounding whitespace ignored) means yes."""
    return answer.strip().casefold() in AFFIRMATIVE


def display_message(message: str) -> None:
    """Show the message between two horizontal rules."""
    print(bold("Generated commit message:"))
    print(dim(rule()))
    print(message)
    print(dim(rule()))
    print()


def confirm(message: str, read: Callable[[str], str] = input) -> bool:
    """Show the message and read a single yes/no answer. No re-prompting.

    End of input declines. Ctrl-C is left to end the whole run.
    """
    display_message(message)
    try:
        answer = read(QUESTION)
    except EOFError:
        print()
        return False
    return is_affirmative(answer)
