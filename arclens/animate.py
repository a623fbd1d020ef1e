"""Eased value animation for :class:`~arclens.reactive.Real` cells.

The animator has no clock of its own: the host advances it with
:meth:`Animator.tick`.  Starting a tween on a cell that is already animating
replaces the running tween (last request wins).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .errors import ConfigurationError
from .reactive import Real

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]

_BACK_OVERSHOOT = 1.70158


def linear(t: float) -> float:
    return t


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2.0)


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - ((-2.0 * t + 2.0) ** 3) / 2.0


def ease_out_back(t: float) -> float:
    # overshoots past 1 before settling
    c3 = _BACK_OVERSHOOT + 1.0
    return 1.0 + c3 * (t - 1.0) ** 3 + _BACK_OVERSHOOT * (t - 1.0) ** 2


EASINGS: Dict[str, Easing] = {
    "linear": linear,
    "ease_out_sine": ease_out_sine,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_out_back": ease_out_back,
}


@dataclass
class Tween:
    cell: Real
    start: float
    target: float
    duration: float
    easing: Easing
    on_done: Optional[Callable[[], None]] = None
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def sample(self) -> float:
        t = min(max(self.elapsed / self.duration, 0.0), 1.0)
        return self.start + (self.target - self.start) * self.easing(t)


class Animator:
    """Interpolates cells toward targets as :meth:`tick` advances time (milliseconds)."""

    def __init__(self) -> None:
        self._tweens: Dict[Real, Tween] = {}

    def eased(
        self,
        cell: Real,
        target: float,
        duration: float,
        *,
        easing: Easing = ease_in_out_cubic,
        on_done: Optional[Callable[[], None]] = None,
    ) -> Optional[Tween]:
        """Animate ``cell`` to ``target`` over ``duration`` ms, superseding any running tween.

        A non-positive duration writes the target immediately and returns ``None``.
        """

        if duration < 0:
            raise ConfigurationError(f"animation duration must be >= 0 (got {duration})")
        previous = self._tweens.pop(cell, None)
        if previous is not None:
            logger.debug("Superseding tween on %r (target %s -> %s)", cell, previous.target, target)
        if duration == 0:
            cell.value = target
            if on_done is not None:
                on_done()
            return None
        tween = Tween(cell, cell.value, float(target), float(duration), easing, on_done)
        self._tweens[cell] = tween
        return tween

    def tick(self, dt: float) -> int:
        """Advance every running tween by ``dt`` ms; return how many are still running."""

        for cell, tween in list(self._tweens.items()):
            if self._tweens.get(cell) is not tween:
                # superseded by a rule that ran during this tick
                continue
            tween.elapsed += dt
            if tween.finished:
                del self._tweens[cell]
                cell.value = tween.target
                if tween.on_done is not None:
                    tween.on_done()
            else:
                cell.value = tween.sample()
        return len(self._tweens)

    def finish_all(self) -> None:
        """Jump every running tween to its target."""

        while self._tweens:
            longest = max(t.duration - t.elapsed for t in self._tweens.values())
            self.tick(max(longest, 0.0))

    def cancel(self, cell: Real) -> bool:
        return self._tweens.pop(cell, None) is not None

    def is_animating(self, cell: Real) -> bool:
        return cell in self._tweens

    def target_of(self, cell: Real) -> Optional[float]:
        tween = self._tweens.get(cell)
        return tween.target if tween is not None else None

    @property
    def running(self) -> int:
        return len(self._tweens)


_DEFAULT_ANIMATOR = Animator()


def get_default_animator() -> Animator:
    return _DEFAULT_ANIMATOR


__all__ = [
    "Animator",
    "EASINGS",
    "Easing",
    "Tween",
    "ease_in_out_cubic",
    "ease_out_back",
    "ease_out_cubic",
    "ease_out_sine",
    "get_default_animator",
    "linear",
]
