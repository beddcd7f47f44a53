#!/usr/bin/env python3
"""
Upload a catalog CSV to the catalog service.

The rows are filed under the given root category; parsing happens on the
service side.

Usage:
    CATALOG_API_URL=http://localhost:8000 python scripts/upload_catalog.py parts.csv "Suspension"
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from parts_finder.adapters.http_facet_catalog import HttpFacetCatalog
from parts_finder.domain.errors import ValidationError
from parts_finder.infra.config import catalog_api_timeout, catalog_api_url
from parts_finder.infra.logging_config import configure_logging
from parts_finder.use_cases.upload_catalog_csv import UploadCatalogCsv, UploadCatalogCsvRequest


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("csv_file", type=Path, help="CSV file with catalog rows")
    parser.add_argument("category", help="Root category the rows are filed under")
    return parser.parse_args(argv)


async def upload(csv_file: Path, category: str) -> bool:
    use_case = UploadCatalogCsv(
        HttpFacetCatalog(base_url=catalog_api_url(), timeout=catalog_api_timeout())
    )
    response = await use_case.execute(
        UploadCatalogCsvRequest(
            filename=csv_file.name,
            content=csv_file.read_bytes(),
            category=category,
        )
    )
    return response.ok


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = parse_args(argv)

    try:
        ok = asyncio.run(upload(args.csv_file, args.category))
    except ValidationError as e:
        for error in e.errors or []:
            print(f"❌ {error['field']}: {error['message']}", file=sys.stderr)
        return 2
    except (OSError, RuntimeError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if not ok:
        print("❌ Upload failed, see log for details", file=sys.stderr)
        return 1

    print(f"✅ Uploaded {args.csv_file.name} under '{args.category}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
