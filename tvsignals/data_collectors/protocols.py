"""Contract between the report assembler and a data source."""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FetchCollaborator(Protocol):
    """Anything that can resolve scanner field names for one symbol.

    Implementations return a mapping from field name to float. Fields the
    source does not know may be left out. Failures are raised, never
    returned.
    """

    def fetch(self, symbol: str, columns: Sequence[str]) -> Mapping[str, float]: ...
