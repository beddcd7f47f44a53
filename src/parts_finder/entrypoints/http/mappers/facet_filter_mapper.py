from __future__ import annotations

from parts_finder.domain.facets import FacetOption, Selection
from parts_finder.entrypoints.http.dtos.facet_filter import (
    FacetDTO,
    FacetOptionDTO,
    FetchOutcomeDTO,
    FilterStateResponseDTO,
    FilterUpdateResponseDTO,
    SelectionDTO,
)
from parts_finder.use_cases.facet_filter import FacetFilterState, FetchOutcome


class FacetFilterMapper:
    """Maps between the facet filter projections and REST DTOs."""

    @staticmethod
    def to_option(option: FacetOption | None) -> FacetOptionDTO | None:
        if option is None:
            return None
        return FacetOptionDTO(key=option.key, label=option.label)

    @staticmethod
    def to_selection(selection: Selection) -> SelectionDTO:
        return SelectionDTO(
            brand=FacetFilterMapper.to_option(selection.brand),
            model=FacetFilterMapper.to_option(selection.model),
            year_range=FacetFilterMapper.to_option(selection.year_range),
            category=FacetFilterMapper.to_option(selection.category),
        )

    @staticmethod
    def to_state(session_id: str, state: FacetFilterState) -> FilterStateResponseDTO:
        """
        Converts a filter snapshot to the response DTO.

        Args:
            session_id: Owning session (echoed back)
            state: Read-only projection of the facet filter

        Returns:
            FilterStateResponseDTO keyed by facet level value
        """
        return FilterStateResponseDTO(
            session_id=session_id,
            selection=FacetFilterMapper.to_selection(state.selection),
            facets={
                level.value: FacetDTO(
                    enabled=state.enabled[level],
                    options=[
                        FacetOptionDTO(key=option.key, label=option.label)
                        for option in state.options[level]
                    ],
                )
                for level in state.options
            },
        )

    @staticmethod
    def to_fetch(outcome: FetchOutcome) -> FetchOutcomeDTO:
        return FetchOutcomeDTO(
            status=outcome.status.value,
            level=outcome.level.value if outcome.level else None,
            error=outcome.error.message if outcome.error else None,
        )

    @staticmethod
    def to_update(
        session_id: str,
        state: FacetFilterState,
        outcomes: list[FetchOutcome],
    ) -> FilterUpdateResponseDTO:
        return FilterUpdateResponseDTO(
            state=FacetFilterMapper.to_state(session_id, state),
            fetches=[FacetFilterMapper.to_fetch(outcome) for outcome in outcomes],
        )
