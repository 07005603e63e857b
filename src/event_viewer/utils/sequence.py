from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderToken:
    """Identity of one render invocation issued by a :class:`RenderSequence`."""

    value: int
    source_id: int

    def __repr__(self) -> str:
        return f"RenderToken({self.value})"


class RenderSequence:
    """Issues monotonically increasing tokens; only the latest one is current.

    Results produced for an older token must be dropped by the caller. The
    underlying work is not aborted, it simply loses the right to render.
    """

    __slots__ = ("_latest",)

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> RenderToken:
        self._latest += 1
        return RenderToken(self._latest, id(self))

    def invalidate(self) -> None:
        """Make every previously issued token stale without issuing a new one."""
        self._latest += 1

    def is_current(self, token: RenderToken) -> bool:
        return token.source_id == id(self) and token.value == self._latest


__all__ = ["RenderSequence", "RenderToken"]
