from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_STORE_TIMEOUT


@dataclass
class StoreConfig:
    url: str
    timeout: float = DEFAULT_STORE_TIMEOUT


class StoreConnection:
    """Singleton-like handle on the remote spreadsheet web app.

    Note: one ``requests.Session`` is shared so keep-alive connections are reused
    between the periodic refreshes.
    """

    _instance: Optional["StoreConnection"] = None

    def __init__(self, config: StoreConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: StoreConfig) -> "StoreConnection":
        if cls._instance is None:
            cls._instance = StoreConnection(config)
        return cls._instance

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def timeout(self) -> float:
        return float(self._config.timeout)

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        self._session.close()
