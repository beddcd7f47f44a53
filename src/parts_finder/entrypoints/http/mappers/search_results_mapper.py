from __future__ import annotations

from parts_finder.domain.facets import Product
from parts_finder.domain.pagination import ResultPaginator
from parts_finder.entrypoints.http.dtos.search import (
    FitmentDTO,
    PageWindowDTO,
    ProductResponseDTO,
    SearchResultsResponseDTO,
)


class SearchResultsMapper:
    """Maps the paginated search results to REST DTOs."""

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            description=product.description,
            brand=product.brand,
            is_universal=product.is_universal,
            fitments=[
                FitmentDTO(
                    brand=fitment.brand,
                    model=fitment.model,
                    start_year=fitment.start_year,
                    end_year=fitment.end_year,
                )
                for fitment in product.fitments
            ],
        )

    @staticmethod
    def to_response(paginator: ResultPaginator[Product]) -> SearchResultsResponseDTO:
        """
        Converts the paginator's current page to the response DTO.

        Navigation is omitted entirely when all results fit on one page.

        Args:
            paginator: Session paginator holding the last search results

        Returns:
            SearchResultsResponseDTO for the current page
        """
        navigation = None
        if paginator.controls_visible:
            window = paginator.window()
            navigation = PageWindowDTO(
                pages=window.pages,
                show_first=window.show_first,
                leading_ellipsis=window.leading_ellipsis,
                show_last=window.show_last,
                trailing_ellipsis=window.trailing_ellipsis,
                has_previous=window.has_previous,
                has_next=window.has_next,
            )

        return SearchResultsResponseDTO(
            products=[SearchResultsMapper.to_product_response(p) for p in paginator.page()],
            total=paginator.total_count,
            page=paginator.current_page,
            total_pages=paginator.total_pages(),
            page_size=paginator.page_size,
            navigation=navigation,
        )
