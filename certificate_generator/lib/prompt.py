"""Line-oriented interactive prompts with defaults and validation."""

from collections.abc import Callable

TRUE_VALUES = frozenset({"1", "t", "true"})
FALSE_VALUES = frozenset({"0", "f", "false"})


def parse_bool(text: str) -> bool:
    """Parse literal boolean text (1, t, true, 0, f, false), case-insensitively.

    Raises:
        ValueError: If text is not a recognised boolean literal
    """
    value = text.lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class Prompter:
    """Reads answers from the terminal.

    A closed input stream surfaces as ``EOFError`` from ``read`` and is left
    to propagate; callers treat it as fatal.
    """

    def __init__(
        self,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize prompter.

        Args:
            read: Function that shows a prompt and returns one line without newline
                (default: input)
            write: Function used for complaints about invalid input (default: print)
        """
        self.read = read or input
        self.write = write or print

    def string(self, label: str, default: str) -> str:
        """Return the entered line, or default when the line is empty."""
        answer = self.read(f"{label}: ")
        if answer == "":
            return default
        return answer

    def boolean(self, label: str, default: bool) -> bool:
        """Prompt until a literal boolean is entered."""
        while True:
            answer = self.string(label, format_bool(default))
            try:
                return parse_bool(answer)
            except ValueError:
                self.write("expected true or false")

    def non_empty(self, label: str) -> str:
        """Prompt until a non-empty line is entered."""
        while True:
            answer = self.string(label, "")
            if answer:
                return answer
            self.write("expected string")
