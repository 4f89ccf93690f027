"""Line oriented console used by the menu loop."""
import sys
from typing import Optional, TextIO


class Console:
    """Reads lines from and writes text to a pair of streams.

    Defaults to stdin/stdout; tests pass ``io.StringIO`` objects.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: bool = True,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.clear_screen = clear_screen

    def write(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def read_line(self) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def ask(self, prompt: str) -> Optional[str]:
        self.write()
        self.write(prompt)
        return self.read_line()

    def clear(self) -> None:
        """Push the previous screen out of view."""
        if self.clear_screen:
            self.stdout.write("\n" * 100)
            self.stdout.flush()
