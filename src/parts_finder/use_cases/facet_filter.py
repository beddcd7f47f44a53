"""Facet filter state machine.

Keeps the brand → model → year range selection consistent as facets are
chosen and cleared, and drives the dependent option fetches.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import cast

from parts_finder.domain.errors import FacetSelectionError, NotFoundError, TransportError
from parts_finder.domain.facets import (
    Brand,
    FacetLevel,
    FacetOption,
    Model,
    Selection,
)
from parts_finder.domain.results import Failure, FetchResult
from parts_finder.ports.facet_catalog import FacetCatalog

logger = logging.getLogger(__name__)

# Level whose options are scoped to (and re-fetched for) each parent level.
DEPENDENT_OPTIONS: dict[FacetLevel, FacetLevel] = {
    FacetLevel.BRAND: FacetLevel.MODEL,
    FacetLevel.MODEL: FacetLevel.YEAR_RANGE,
}


class FetchStatus(str, Enum):
    APPLIED = "applied"  # options fetched and stored
    SKIPPED = "skipped"  # no fetch needed
    STALE = "stale"  # superseded while in flight, result dropped
    FAILED = "failed"  # transport failure, prior state restored


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    status: FetchStatus
    level: FacetLevel | None = None
    error: TransportError | None = None


@dataclass(frozen=True, slots=True)
class FacetFilterState:
    """Read-only projection consumed by rendering."""

    selection: Selection
    enabled: dict[FacetLevel, bool]
    options: dict[FacetLevel, list[FacetOption]]


class FacetFilter:
    """
    Filter state machine for one user session.

    Its state is the current Selection plus the option lists loaded for each
    level. Transitions:
    - select(level, option): set the level, clear every level downstream of
      it in the brand → model → year range cascade, then re-fetch the
      dependent options if the level's value changed. Category sits outside
      the cascade.
    - clear_all(): unset every level and drop the dependent option lists.

    A dependent fetch result is applied only if it is still the latest fetch
    for its level: any later select, clear or clear_all that invalidates the
    level supersedes it, even when the parent later returns to the same
    value. If the latest fetch fails, the cascade levels and their option
    lists are restored to what they were before the event.
    """

    def __init__(self, catalog: FacetCatalog) -> None:
        self._catalog = catalog
        self._selection = Selection()
        self._options: dict[FacetLevel, list[FacetOption]] = {level: [] for level in FacetLevel}
        # Bumped whenever a dependent option list is invalidated; a fetch only
        # lands if the generation it started under is still current.
        self._generations: dict[FacetLevel, int] = {
            level: 0 for level in DEPENDENT_OPTIONS.values()
        }

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @property
    def selection(self) -> Selection:
        return self._selection

    def options(self, level: FacetLevel) -> list[FacetOption]:
        return list(self._options[level])

    def is_enabled(self, level: FacetLevel) -> bool:
        if level is FacetLevel.MODEL:
            return self._selection.brand is not None
        if level is FacetLevel.YEAR_RANGE:
            return self._selection.model is not None
        return True

    def snapshot(self) -> FacetFilterState:
        return FacetFilterState(
            selection=self._selection,
            enabled={level: self.is_enabled(level) for level in FacetLevel},
            options={level: self.options(level) for level in FacetLevel},
        )

    def option_for(self, level: FacetLevel, key: str) -> FacetOption:
        """
        Resolve an option key against the options currently loaded for a level.

        Raises:
            NotFoundError: If no loaded option has that key
        """
        for option in self._options[level]:
            if option.key == key:
                return option
        raise NotFoundError(resource=level.value, identifier=key)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def load(self) -> list[FetchOutcome]:
        """Fetch the root option lists (brands and categories)."""
        brands, categories = await asyncio.gather(
            self._catalog.list_brands(),
            self._catalog.list_categories(),
        )
        return [
            self._store_root(FacetLevel.BRAND, brands),
            self._store_root(FacetLevel.CATEGORY, categories),
        ]

    async def select(self, level: FacetLevel, option: FacetOption | None) -> FetchOutcome:
        """
        Select (or, with None, unset) an option and cascade.

        Raises:
            FacetSelectionError: If the level is disabled or the option is not
                among the options loaded for it
        """
        self._check_selectable(level, option)

        previous_selection = self._selection
        previous_options = dict(self._options)
        changed = previous_selection.get(level) != option

        selection = previous_selection.replace(level, option)
        for downstream in level.downstream():
            selection = selection.replace(downstream, None)
        self._selection = selection

        dependent = DEPENDENT_OPTIONS.get(level)
        if dependent is None:
            return FetchOutcome(FetchStatus.SKIPPED)

        # Options below the dependent level were scoped to a now-unset selection
        for downstream in dependent.downstream():
            self._invalidate(downstream)

        if not changed:
            return FetchOutcome(FetchStatus.SKIPPED, level=dependent)

        generation = self._invalidate(dependent)
        if option is None:
            return FetchOutcome(FetchStatus.SKIPPED, level=dependent)

        result = await self._fetch(dependent, selection)

        if self._generations[dependent] != generation:
            logger.debug(
                "Discarding stale facet options",
                extra={"level": dependent.value, "parent": option.key},
            )
            return FetchOutcome(FetchStatus.STALE, level=dependent)

        if isinstance(result, Failure):
            self._restore(level, previous_selection, previous_options)
            logger.info(
                "Facet options unavailable, selection restored",
                extra={"level": dependent.value, "parent": option.key},
            )
            return FetchOutcome(FetchStatus.FAILED, level=dependent, error=result.error)

        self._options[dependent] = list(result.value)
        return FetchOutcome(FetchStatus.APPLIED, level=dependent)

    async def select_key(self, level: FacetLevel, key: str) -> FetchOutcome:
        """
        Select the loaded option with the given key.

        Raises:
            FacetSelectionError: If the level is disabled
            NotFoundError: If no loaded option has that key
        """
        if not self.is_enabled(level):
            raise FacetSelectionError.parent_unset(level.value)
        return await self.select(level, self.option_for(level, key))

    async def clear(self, level: FacetLevel) -> FetchOutcome:
        return await self.select(level, None)

    def clear_all(self) -> None:
        self._selection = Selection()
        for level in DEPENDENT_OPTIONS.values():
            self._invalidate(level)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_selectable(self, level: FacetLevel, option: FacetOption | None) -> None:
        if option is None:
            return
        if not self.is_enabled(level):
            raise FacetSelectionError.parent_unset(level.value)
        if option not in self._options[level]:
            raise FacetSelectionError.unavailable(level.value, option.key)

    async def _fetch(self, level: FacetLevel, selection: Selection) -> FetchResult[list[FacetOption]]:
        # The guards in select() keep the parent levels set
        brand = cast(Brand, selection.brand)
        if level is FacetLevel.MODEL:
            return await self._catalog.list_models(brand)
        return await self._catalog.list_year_ranges(brand, cast(Model, selection.model))

    def _invalidate(self, level: FacetLevel) -> int:
        """Drop a dependent option list and supersede any fetch in flight for it."""
        self._options[level] = []
        self._generations[level] += 1
        return self._generations[level]

    def _restore(
        self,
        level: FacetLevel,
        selection: Selection,
        options: dict[FacetLevel, list[FacetOption]],
    ) -> None:
        restored = self._selection
        for cascade_level in (level, *level.downstream()):
            restored = restored.replace(cascade_level, selection.get(cascade_level))
            if cascade_level is not level:
                self._options[cascade_level] = options[cascade_level]
        self._selection = restored

    def _store_root(self, level: FacetLevel, result: FetchResult[list]) -> FetchOutcome:
        if isinstance(result, Failure):
            return FetchOutcome(FetchStatus.FAILED, level=level, error=result.error)
        self._options[level] = list(result.value)
        return FetchOutcome(FetchStatus.APPLIED, level=level)
