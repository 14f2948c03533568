# setup_cosmos.py
import argparse
import asyncio
import sys

from uploader.data.cosmos_utils import CosmosConnectionError, CosmosServiceError, retrieve_database
from uploader.logging_config import configure_logging
from uploader.settings import CosmosSettings

SETUP_ERRORS = CosmosConnectionError + (CosmosServiceError,)


async def provision(settings: CosmosSettings) -> str:
    handle = await retrieve_database(settings.endpoint, settings.key, settings.database_name)
    async with handle:
        return handle.id


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the uploader's Cosmos DB database if it doesn't exist.")
    parser.add_argument("--database", help="Database name (defaults to COSMOS_DB)")
    parser.add_argument("--log-level", help="Log level (defaults to UPLOADER_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        settings = CosmosSettings.from_env()
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    if args.database:
        settings = CosmosSettings(settings.endpoint, settings.key, args.database)

    try:
        name = asyncio.run(provision(settings))
    except SETUP_ERRORS as e:
        print(f"❌ Cosmos DB setup failed: {e}", file=sys.stderr)
        return 1

    print(f"✅ Cosmos DB setup complete: {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
