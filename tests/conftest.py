import asyncio
import base64

import pytest
from azure.core.exceptions import ServiceRequestError
from azure.cosmos.exceptions import CosmosHttpResponseError

from uploader.data import cosmos_utils


class FakeDatabase:
    def __init__(self, id):
        self.id = id
        self.items = {}

    async def upsert_item(self, body):
        stored = dict(body, _rid="rid", _etag="etag", _ts=1)
        self.items[body["id"]] = stored
        return stored

    async def read_item(self, item):
        return self.items[item]


class FakeAccount:
    """In-memory stand-in for a Cosmos DB account."""

    def __init__(self):
        self.databases = {}
        self.created = 0
        self.clients = []

    def client_class(self):
        account = self

        class FakeCosmosClient:
            def __init__(self, url, credential, **kwargs):
                self.url = url
                self.credential = credential
                self.kwargs = kwargs
                self.closed = False
                account.clients.append(self)

            async def create_database_if_not_exists(self, id, **kwargs):
                await asyncio.sleep(0)
                # the SDK signs requests with the decoded master key
                base64.b64decode(self.credential)
                if self.url.endswith(".invalid"):
                    raise ServiceRequestError(f"Cannot connect to host {self.url}")
                if not id:
                    raise CosmosHttpResponseError(status_code=400, message="Database id is required")
                if id not in account.databases:
                    account.databases[id] = FakeDatabase(id)
                    account.created += 1
                return account.databases[id]

            async def close(self):
                self.closed = True

        return FakeCosmosClient


@pytest.fixture
def fake_cosmos(monkeypatch):
    account = FakeAccount()
    monkeypatch.setattr(cosmos_utils, "CosmosClient", account.client_class())
    return account
