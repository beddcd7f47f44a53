from __future__ import annotations

from abc import ABC, abstractmethod

from parts_finder.use_cases.filter_session import FilterSession


class FilterSessionStore(ABC):
    """
    Port for keeping filter sessions between requests.

    Sessions are owned by one user each; implementations never share a
    FacetFilter between session ids.
    """

    @abstractmethod
    def add(self, session: FilterSession) -> None: ...

    @abstractmethod
    def get(self, session_id: str) -> FilterSession | None: ...

    @abstractmethod
    def remove(self, session_id: str) -> bool:
        """Drop a session; returns False if it did not exist."""
        ...
