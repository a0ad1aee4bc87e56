from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


@dataclass
class DBConfig:
    uri: str
    database: str
    timeout_ms: int = 5000


class DatabaseConnection:
    """Owns the process-wide MongoClient.

    Note: Built once by the container and handed to repositories explicitly.
    pymongo connects lazily, so constructing this does no I/O.
    """

    def __init__(self, config: DBConfig, *, client: Optional[MongoClient] = None):
        self._config = config
        self._client = client or MongoClient(config.uri, serverSelectionTimeoutMS=int(config.timeout_ms))

    @property
    def database_name(self) -> str:
        return self._config.database

    def database(self) -> Database:
        return self._client[self._config.database]

    def collection(self, name: str) -> Collection:
        return self.database()[name]

    def ping(self) -> Any:
        return self.database().command("ping")

    def close(self) -> None:
        self._client.close()
