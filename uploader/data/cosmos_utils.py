import binascii
import logging
from dataclasses import dataclass, field
from typing import Optional

from azure.core.exceptions import ServiceRequestError
from azure.cosmos.aio import CosmosClient, DatabaseProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

from uploader.data.options import ClientOptions, SerializationOptions
from uploader.data.serialization import DocumentSerializer

logger = logging.getLogger(__name__)

# Raised unchanged from the SDK. The connection kind also covers a master key
# that fails base64 decoding, which the SDK hits while signing the first request.
CosmosConnectionError = (ServiceRequestError, binascii.Error)
CosmosServiceError = CosmosHttpResponseError


@dataclass(frozen=True)
class DatabaseHandle:
    """A provisioned database plus the client connection that reaches it."""
    id: str
    database: DatabaseProxy = field(compare=False, repr=False)
    client: CosmosClient = field(compare=False, repr=False)
    options: ClientOptions = field(compare=False, repr=False)
    serializer: DocumentSerializer = field(compare=False, repr=False)

    async def close(self):
        await self.client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


def build_client_options() -> ClientOptions:
    serializer_options = SerializationOptions(ignore_null_values=True)
    return ClientOptions(
        allow_bulk_execution=True,
        serializer_options=serializer_options,
        max_retry_attempts_on_rate_limited_requests=10,
    )


def open_client(endpoint: Optional[str], key: Optional[str],
                options: Optional[ClientOptions] = None) -> CosmosClient:
    """
    Build a Cosmos DB client under the uploader's client policy.
    No request is made. A missing endpoint or key is left for the SDK, which
    raises TypeError while building the client.
    """
    options = options or build_client_options()
    return CosmosClient(endpoint, key, **options.to_client_kwargs())


async def retrieve_database(endpoint: Optional[str], key: Optional[str],
                            database_name: str) -> DatabaseHandle:
    """
    Connect to Cosmos DB and make sure the named database exists.

    Returns a handle to the new or pre-existing database. The client inside
    the handle belongs to the caller. Connection and service errors from the
    SDK propagate unchanged.
    """
    options = build_client_options()
    logger.info("Provisioning database '%s' at %s", database_name, endpoint)
    client = open_client(endpoint, key, options)
    try:
        database = await client.create_database_if_not_exists(id=database_name)
    except Exception:
        await client.close()
        raise

    logger.info("Database '%s' is ready", database.id)
    return DatabaseHandle(
        id=database.id,
        database=database,
        client=client,
        options=options,
        serializer=DocumentSerializer(options.serializer_options),
    )


provision_database = retrieve_database
