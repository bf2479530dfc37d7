from __future__ import annotations

from typing import Protocol, Sequence


class TeamRepository(Protocol):
    """The team list is stored as one ordered list of names."""

    def list_names(self) -> Sequence[str]:
        raise NotImplementedError

    def replace_all(self, names: Sequence[str]) -> None:
        raise NotImplementedError
