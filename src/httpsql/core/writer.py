"""User facing output for the query command."""

from rich.console import Console, RenderableType
from rich.text import Text

OK_PREFIX = ("[ok]", "bold green")
ERROR_PREFIX = ("[error]", "bold red")


class Writer:
    """Writes success lines, error lines and tables to a console.

    Messages are assembled as plain text and never parsed as console markup.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def write_ok(self, message: str) -> None:
        self.console.print(Text.assemble(OK_PREFIX, " ", message))

    def write_err(self, message: str) -> None:
        self.console.print(Text.assemble(ERROR_PREFIX, " ", message))

    def writeln(self, renderable: RenderableType = "") -> None:
        if isinstance(renderable, str):
            renderable = Text(renderable)
        self.console.print(renderable)
