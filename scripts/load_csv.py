"""Load the street archive CSV export into the search index.

Usage:
    python -m scripts.load_csv path/to/streets.csv [--recreate]
Creates the index with the search mapping when missing (--recreate drops
it first), bulk-indexes every row with deleted=false, then prints the count.
"""

import argparse
import asyncio
import sys

from elastic_transport import TransportError
from elasticsearch import ApiError

from street_archive.core.config import get_settings
from street_archive.infrastructure.search.client import SearchClientFactory
from street_archive.infrastructure.search.loader import load_records, read_csv_records
from street_archive.infrastructure.search.mapping import ensure_index
from street_archive.shared.telemetry.logging import setup_logging


async def main(csv_path: str, recreate: bool) -> int:
    """Load csv_path into the configured index. Returns the exit code."""
    settings = get_settings()
    index = settings.elasticsearch_index
    try:
        records = read_csv_records(csv_path)
    except OSError as e:
        print(f"Cannot read {csv_path}: {e}", file=sys.stderr)
        return 1
    print(f"Parsed {len(records)} record(s) from {csv_path}")

    client = SearchClientFactory.create_search_client(settings)
    try:
        await ensure_index(client, index, recreate=recreate)
        indexed, errors = await load_records(client, index, records)
        count = await client.count(index=index)
    except (ApiError, TransportError) as e:
        print(f"Loading into {index} failed: {e}", file=sys.stderr)
        return 1
    finally:
        await client.close()

    for error in errors[:10]:
        print(f"Failed: {error}", file=sys.stderr)
    print(f"Indexed {indexed} record(s); index {index} now holds {count['count']}")
    return 1 if errors else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load the street archive CSV into Elasticsearch.")
    parser.add_argument("csv_path", help="CSV export with the Hebrew header row")
    parser.add_argument(
        "--recreate",
        action="store_true",
        help="Delete the index first if it exists",
    )
    args = parser.parse_args()
    setup_logging()
    sys.exit(asyncio.run(main(args.csv_path, args.recreate)))
