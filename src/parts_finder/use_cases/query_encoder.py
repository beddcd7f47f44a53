from __future__ import annotations

from parts_finder.domain.facets import FacetLevel, QueryParams, Selection

# Canonical parameter order and wire names for the products search.
PARAM_NAMES: dict[FacetLevel, str] = {
    FacetLevel.BRAND: "brand",
    FacetLevel.MODEL: "model",
    FacetLevel.YEAR_RANGE: "year",
    FacetLevel.CATEGORY: "category_id",
}


def encode(selection: Selection) -> QueryParams:
    """
    Serialize a selection into ordered search parameters.

    Only set levels are emitted, in the order brand, model, year, category_id.
    Each value is the option's stable key: names for brand and model, the id
    for category, and "<start>-<end>" for the year range, with an open-ended
    range rendering an empty end ("2015-").

    Pure function: the same selection always yields the same parameters.
    """
    params: QueryParams = []
    for level, name in PARAM_NAMES.items():
        option = selection.get(level)
        if option is not None:
            params.append((name, option.key))
    return params
