"""Tests for FacetFilterMapper."""

from __future__ import annotations

from parts_finder.domain.errors import TransportError
from parts_finder.domain.facets import Brand, Category, FacetLevel, Model, Selection, YearRange
from parts_finder.entrypoints.http.dtos.facet_filter import FacetOptionDTO
from parts_finder.entrypoints.http.mappers.facet_filter_mapper import FacetFilterMapper
from parts_finder.use_cases.facet_filter import FacetFilterState, FetchOutcome, FetchStatus

KTM = Brand(id=1, name="KTM")
SX250 = Model(id=10, name="250SX")


def make_state() -> FacetFilterState:
    return FacetFilterState(
        selection=Selection(brand=KTM),
        enabled={
            FacetLevel.BRAND: True,
            FacetLevel.MODEL: True,
            FacetLevel.YEAR_RANGE: False,
            FacetLevel.CATEGORY: True,
        },
        options={
            FacetLevel.BRAND: [KTM],
            FacetLevel.MODEL: [SX250],
            FacetLevel.YEAR_RANGE: [],
            FacetLevel.CATEGORY: [Category(id=3, name="Suspension")],
        },
    )


def test_to_option_uses_key_and_label() -> None:
    option = FacetFilterMapper.to_option(YearRange(start_year=2015, end_year=9999))

    assert option == FacetOptionDTO(key="2015-", label="2015 - ")


def test_to_option_none() -> None:
    assert FacetFilterMapper.to_option(None) is None


def test_to_state_keys_facets_by_level_value() -> None:
    dto = FacetFilterMapper.to_state("s-1", make_state())

    assert dto.session_id == "s-1"
    assert set(dto.facets) == {"brand", "model", "year_range", "category"}
    assert dto.selection.brand == FacetOptionDTO(key="KTM", label="KTM")
    assert dto.selection.model is None
    assert dto.facets["year_range"].enabled is False
    assert dto.facets["category"].options == [FacetOptionDTO(key="3", label="Suspension")]


def test_to_fetch_failed_outcome_carries_message() -> None:
    outcome = FetchOutcome(
        FetchStatus.FAILED,
        level=FacetLevel.MODEL,
        error=TransportError("Failed to fetch models from catalog service"),
    )

    dto = FacetFilterMapper.to_fetch(outcome)

    assert dto.status == "failed"
    assert dto.level == "model"
    assert dto.error == "Failed to fetch models from catalog service"


def test_to_fetch_skipped_without_level() -> None:
    dto = FacetFilterMapper.to_fetch(FetchOutcome(FetchStatus.SKIPPED))

    assert dto.model_dump() == {"status": "skipped", "level": None, "error": None}


def test_to_update_wraps_state_and_fetches() -> None:
    dto = FacetFilterMapper.to_update(
        "s-1", make_state(), [FetchOutcome(FetchStatus.APPLIED, level=FacetLevel.MODEL)]
    )

    assert dto.state.session_id == "s-1"
    assert [f.status for f in dto.fetches] == ["applied"]
