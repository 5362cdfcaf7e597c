"""Interactive confirmation prompts."""

from collections.abc import Callable

CONFIRM_PROMPT = "Do you want to create the project site structure? (yes/no): "


def prompt_yes_no(
    message: str = CONFIRM_PROMPT,
    input_fn: Callable[[str], str] = input,
) -> bool:
    """Ask until the user answers 'yes' or 'no'.

    End of input (Ctrl-D, closed stdin) counts as 'no'.
    """
    while True:
        try:
            response = input_fn(message).strip().lower()
        except EOFError:
            print()
            return False
        if response in ("yes", "no"):
            return response == "yes"
        print("Please enter 'yes' or 'no'.")
