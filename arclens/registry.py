"""Single-membership bookkeeping for proximity and snap groups."""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from .errors import MembershipError
from .lens import Lens

logger = logging.getLogger(__name__)

G = TypeVar("G")


class MembershipRegistry(Generic[G]):
    """Maps each lens to the one group of a given kind that owns it.

    Entries are keyed by lens identity and stay until the owning group releases
    them, usually from its ``dispose`` method.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._owners: Dict[Lens, G] = {}

    def owner(self, lens: Lens) -> Optional[G]:
        return self._owners.get(lens)

    def __contains__(self, lens: object) -> bool:
        return lens in self._owners

    def __len__(self) -> int:
        return len(self._owners)

    def check(self, lenses: Iterable[Lens]) -> None:
        """Raise :class:`MembershipError` for the first lens that is already owned."""

        for lens in lenses:
            if lens in self._owners:
                raise MembershipError(self.kind, lens)

    def claim(self, lenses: Iterable[Lens], owner: G) -> None:
        """Register every lens under ``owner``, or none of them."""

        lenses = list(lenses)
        self.check(lenses)
        seen = set()
        for lens in lenses:
            if lens in seen:
                raise MembershipError(self.kind, lens)
            seen.add(lens)
        for lens in lenses:
            self._owners[lens] = owner
        logger.debug("Registered %d lens(es) in %s registry", len(lenses), self.kind)

    def release(self, owner: G) -> List[Lens]:
        released = [lens for lens, current in self._owners.items() if current is owner]
        for lens in released:
            del self._owners[lens]
        logger.debug("Released %d lens(es) from %s registry", len(released), self.kind)
        return released

    def release_lens(self, lens: Lens) -> bool:
        return self._owners.pop(lens, None) is not None

    def clear(self) -> None:
        self._owners.clear()


PROXIMITY_REGISTRY: MembershipRegistry = MembershipRegistry("proximity")
SNAP_REGISTRY: MembershipRegistry = MembershipRegistry("snap")


__all__ = ["MembershipRegistry", "PROXIMITY_REGISTRY", "SNAP_REGISTRY"]
