"""Create the street-names index with the search mapping.

Usage:
    python -m scripts.create_index [--recreate]
Reads ELASTICSEARCH_URL / ELASTICSEARCH_INDEX (and credentials) from config.
--recreate drops an existing index first; all indexed records are lost.
"""

import argparse
import asyncio
import sys

from elastic_transport import TransportError
from elasticsearch import ApiError

from street_archive.core.config import get_settings
from street_archive.infrastructure.search.client import SearchClientFactory
from street_archive.infrastructure.search.mapping import ensure_index
from street_archive.shared.telemetry.logging import setup_logging


async def main(recreate: bool) -> int:
    """Create (or recreate) the configured index. Returns the exit code."""
    settings = get_settings()
    client = SearchClientFactory.create_search_client(settings)
    try:
        created = await ensure_index(
            client, settings.elasticsearch_index, recreate=recreate
        )
    except (ApiError, TransportError) as e:
        print(f"Failed to create index {settings.elasticsearch_index}: {e}", file=sys.stderr)
        return 1
    finally:
        await client.close()

    if created:
        print(f"Created index {settings.elasticsearch_index}")
    else:
        print(f"Index {settings.elasticsearch_index} already exists (use --recreate to drop it)")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the street-names index.")
    parser.add_argument(
        "--recreate",
        action="store_true",
        help="Delete the index first if it exists",
    )
    args = parser.parse_args()
    setup_logging()
    sys.exit(asyncio.run(main(args.recreate)))
