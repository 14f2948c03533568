import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DB_NAME = "UploaderDB"


@dataclass(frozen=True)
class CosmosSettings:
    endpoint: Optional[str]
    key: Optional[str]
    database_name: str = DEFAULT_DB_NAME

    @classmethod
    def from_env(cls, require: bool = True) -> "CosmosSettings":
        """
        Read Cosmos DB settings from the environment (and a .env file if present).
        """
        load_dotenv()
        endpoint = os.getenv("COSMOS_ENDPOINT")
        key = os.getenv("COSMOS_KEY")
        if require and not (endpoint and key):
            raise ValueError("Missing Cosmos DB endpoint/key. Check your .env file.")
        return cls(
            endpoint=endpoint,
            key=key,
            database_name=os.getenv("COSMOS_DB", DEFAULT_DB_NAME),
        )
