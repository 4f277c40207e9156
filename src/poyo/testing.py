"""Test utilities for poyo.

:class:`ScriptedPrompter` stands in for the terminal so interactive
flows (``route remove``, ``route sync``) run headlessly::

    prompter = ScriptedPrompter(
        selects=["prune"],
        confirms=[True],
        multi_selects=[ALL],
    )
    Reconciler(config, prompter).run()
    assert prompter.asked == ["How should we resolve these discrepancies?", ...]
"""

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from poyo.prompts import Choice

# multi_select answer meaning "every option offered"
ALL = object()


class ScriptedPrompter:
    """Prompter that replays queued answers.

    ``selects`` holds option *values* to return; ``multi_selects`` holds
    lists of values, :data:`ALL`, or a callable receiving the offered
    choices.  Running out of answers raises ``AssertionError`` so a test
    notices an unexpected question.
    """

    def __init__(
        self,
        *,
        confirms: Iterable[bool] = (),
        selects: Iterable[Any] = (),
        multi_selects: Iterable[Any] = (),
    ) -> None:
        self._confirms = deque(confirms)
        self._selects = deque(selects)
        self._multi = deque(multi_selects)
        self.asked: list[str] = []
        self.offered: dict[str, list[Choice]] = {}

    def confirm(self, question: str) -> bool:
        self.asked.append(question)
        if not self._confirms:
            raise AssertionError(f"unexpected confirm: {question}")
        return self._confirms.popleft()

    def select(self, title: str, options: Sequence[Choice]) -> Any | None:
        self.asked.append(title)
        self.offered[title] = list(options)
        if not self._selects:
            raise AssertionError(f"unexpected select: {title}")
        answer = self._selects.popleft()
        values = [o.value for o in options]
        if answer is not None and answer not in values:
            raise AssertionError(f"{answer!r} was not offered for {title!r}: {values}")
        return answer

    def multi_select(self, title: str, options: Sequence[Choice]) -> list[Any]:
        self.asked.append(title)
        self.offered[title] = list(options)
        if not self._multi:
            raise AssertionError(f"unexpected multi_select: {title}")
        answer = self._multi.popleft()
        if answer is ALL:
            return [o.value for o in options]
        if callable(answer):
            pick: Callable[[Sequence[Choice]], list[Any]] = answer
            return pick(options)
        return list(answer)
