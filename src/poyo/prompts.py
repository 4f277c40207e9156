"""Interactive choice provider.

The reconciler and the ``remove`` command never talk to the terminal
directly.  They call a :class:`Prompter`::

    prompter.confirm("Delete this controller file?")
    prompter.select("How should we resolve these discrepancies?", choices)
    prompter.multi_select("Select routes to add:", choices)

No base class required.  :class:`TerminalPrompter` is the rich-backed
implementation used by the CLI; ``poyo.testing.ScriptedPrompter``
replays canned answers for headless tests.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt


@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable option: what the user sees and what the caller gets."""

    label: str
    value: Any


class Prompter(Protocol):
    """Synchronous confirm / select / multi-select capability."""

    def confirm(self, question: str) -> bool: ...

    def select(self, title: str, options: Sequence[Choice]) -> Any | None: ...

    def multi_select(self, title: str, options: Sequence[Choice]) -> list[Any]: ...


class TerminalPrompter:
    """Prompter that asks on the terminal through rich.

    ``select`` shows a numbered list and reads one number.
    ``multi_select`` reads comma-separated numbers; ``all`` picks every
    option and an empty answer picks none.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def confirm(self, question: str) -> bool:
        return Confirm.ask(f"[bold]{question}[/]", default=False, console=self.console)

    def select(self, title: str, options: Sequence[Choice]) -> Any | None:
        if not options:
            return None
        self._print_options(title, options)
        numbers = [str(i) for i in range(1, len(options) + 1)]
        answer = Prompt.ask("Choose", choices=numbers, console=self.console)
        return options[int(answer) - 1].value

    def multi_select(self, title: str, options: Sequence[Choice]) -> list[Any]:
        if not options:
            return []
        self._print_options(title, options)
        while True:
            answer = Prompt.ask(
                "Numbers (comma-separated, 'all', or empty for none)",
                default="",
                show_default=False,
                console=self.console,
            )
            picked = parse_selection(answer, len(options))
            if picked is not None:
                return [options[i].value for i in picked]
            self.console.print("[red]Please enter numbers from the list.[/]")

    def _print_options(self, title: str, options: Sequence[Choice]) -> None:
        self.console.print(f"[bold]{title}[/]")
        for i, option in enumerate(options, start=1):
            self.console.print(f"  {i}. {option.label}", highlight=False)


def parse_selection(answer: str, count: int) -> list[int] | None:
    """Parse a multi-select answer into zero-based indices.

    Returns None if the answer is not understood, so the caller can ask
    again.  Duplicates are dropped; order follows the option list.
    """
    text = answer.strip().lower()
    if not text:
        return []
    if text == "all":
        return list(range(count))

    picked: set[int] = set()
    for part in text.replace(" ", ",").split(","):
        if not part:
            continue
        if not part.isdigit():
            return None
        index = int(part) - 1
        if not 0 <= index < count:
            return None
        picked.add(index)
    return sorted(picked)
