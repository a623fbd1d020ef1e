"""Mutable cells and synchronous dependency-tracked recomputation.

Cells (:class:`Real`, :class:`Bool`, :class:`Item`, :class:`Point`) keep the
rules subscribed to them and notify those rules whenever a write actually
changes their value.  A :class:`Reactive` dispatcher owns rules and decides
when they run:

* outside a batch a notification runs every subscribed rule immediately, in
  subscription order, inside the writer's call stack;
* a rule is never re-entered.  When one of its cells changes while it is
  running (directly or through a chain of other rules) it is marked dirty and
  runs again right after the current invocation returns.  A rule that keeps
  dirtying itself raises :class:`~arclens.errors.ReactiveCycleError` after
  ``max_reruns`` consecutive re-runs;
* inside :meth:`Reactive.batch` notifications are collected and every affected
  rule runs once when the outermost batch exits.

Exceptions raised by a rule propagate to whoever performed the write.  A rule
whose first run (``run_now``) raises is disposed before the error propagates.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import ReactiveCycleError

logger = logging.getLogger(__name__)


class Cell:
    """Base class for observable values.  Hashing and equality are by identity."""

    def __init__(self) -> None:
        self._rules: List["Rule"] = []

    def _subscribe(self, rule: "Rule") -> None:
        self._rules.append(rule)

    def _unsubscribe(self, rule: "Rule") -> None:
        try:
            self._rules.remove(rule)
        except ValueError:
            pass

    def _changed(self) -> None:
        for rule in list(self._rules):
            rule.trigger()

    @property
    def subscriber_count(self) -> int:
        return len(self._rules)


class Real(Cell):
    def __init__(self, value: float = 0.0) -> None:
        super().__init__()
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new: float) -> None:
        new = float(new)
        if new == self._value:
            return
        self._value = new
        self._changed()

    def __repr__(self) -> str:
        return f"Real({self._value!r})"


class Bool(Cell):
    def __init__(self, value: bool = False) -> None:
        super().__init__()
        self._value = bool(value)

    @property
    def value(self) -> bool:
        return self._value

    @value.setter
    def value(self, new: bool) -> None:
        new = bool(new)
        if new == self._value:
            return
        self._value = new
        self._changed()

    def __repr__(self) -> str:
        return f"Bool({self._value!r})"


class Item(Cell):
    """Holds an arbitrary object; a write notifies unless it stores the very same object."""

    def __init__(self, value: Any = None) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new: Any) -> None:
        if new is self._value:
            return
        self._value = new
        self._changed()

    def __repr__(self) -> str:
        return f"Item({self._value!r})"


class Point(Cell):
    """Mutable 2D position.  :meth:`move_to` updates both coordinates with one notification."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__()
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def of(cls, value: "Point | Iterable[float] | None") -> "Point":
        if isinstance(value, Point):
            return value
        if value is None:
            return cls()
        x, y = value
        return cls(x, y)

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self.move_to(value, self._y)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self.move_to(self._x, value)

    def move_to(self, x: float, y: float) -> None:
        x = float(x)
        y = float(y)
        if x == self._x and y == self._y:
            return
        self._x = x
        self._y = y
        self._changed()

    def copy_from(self, other: "Point") -> None:
        self.move_to(other.x, other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return self._x, self._y

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"


class Rule:
    """A callback subscribed to a fixed list of cells."""

    def __init__(
        self,
        reactive: "Reactive",
        cells: Iterable[Cell],
        callback: Callable[[], Any],
        name: Optional[str] = None,
    ) -> None:
        self.reactive = reactive
        self.cells: Tuple[Cell, ...] = tuple(cells)
        self.callback = callback
        self.name = name or getattr(callback, "__qualname__", repr(callback))
        self.running = False
        self.dirty = False
        self.disposed = False

    def trigger(self) -> None:
        self.reactive._schedule(self)

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        for cell in self.cells:
            cell._unsubscribe(self)
        self.reactive._forget(self)

    def __repr__(self) -> str:
        return f"Rule({self.name!r}, cells={len(self.cells)})"


class Reactive:
    """Dispatcher running :class:`Rule` callbacks when their cells change."""

    def __init__(self, *, max_reruns: int = 100) -> None:
        self.max_reruns = max_reruns
        self._rules: Dict[Rule, None] = {}
        self._batch_depth = 0
        self._pending: Dict[Rule, None] = {}

    def do(
        self,
        cells: Iterable[Cell],
        callback: Callable[[], Any],
        *,
        run_now: bool = True,
        name: Optional[str] = None,
    ) -> Rule:
        """Run ``callback`` whenever any of ``cells`` changes; optionally run it once now."""

        rule = Rule(self, cells, callback, name)
        for cell in rule.cells:
            cell._subscribe(rule)
        self._rules[rule] = None
        logger.debug("Registered rule %s on %d cell(s)", rule.name, len(rule.cells))
        if run_now:
            try:
                self._run(rule)
            except Exception:
                rule.dispose()
                raise
        return rule

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer rule execution until the outermost batch exits; each rule then runs once."""

        self._batch_depth += 1
        try:
            yield
        except BaseException:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                self._pending.clear()
            raise
        self._batch_depth -= 1
        if self._batch_depth == 0:
            self._flush()

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def _schedule(self, rule: Rule) -> None:
        if rule.disposed:
            return
        if self._batch_depth:
            self._pending[rule] = None
            return
        self._run(rule)

    def _flush(self) -> None:
        while self._pending:
            rule = next(iter(self._pending))
            del self._pending[rule]
            self._run(rule)

    def _run(self, rule: Rule) -> None:
        if rule.disposed:
            return
        if rule.running:
            rule.dirty = True
            return
        rule.running = True
        reruns = 0
        try:
            while True:
                rule.dirty = False
                rule.callback()
                if not rule.dirty or rule.disposed:
                    break
                reruns += 1
                if reruns > self.max_reruns:
                    raise ReactiveCycleError(
                        f"Rule {rule.name!r} did not settle after {self.max_reruns} re-runs"
                    )
        finally:
            rule.running = False

    def _forget(self, rule: Rule) -> None:
        self._rules.pop(rule, None)
        self._pending.pop(rule, None)


_DEFAULT_REACTIVE = Reactive()


def get_default_reactive() -> Reactive:
    return _DEFAULT_REACTIVE


def attach_point(target: Point, source: Point, reactive: Optional[Reactive] = None) -> Rule:
    """Keep ``target`` on top of ``source``; the attachment is one-directional."""

    reactive = reactive or _DEFAULT_REACTIVE
    return reactive.do([source], lambda: target.copy_from(source), name="attach_point")


__all__ = [
    "Bool",
    "Cell",
    "Item",
    "Point",
    "Reactive",
    "Real",
    "Rule",
    "attach_point",
    "get_default_reactive",
]
