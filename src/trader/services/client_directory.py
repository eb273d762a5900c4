"""Registry of clients known to the ledger."""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Optional

from trader.core.exceptions import ValidationError, NotFoundError
from trader.domain.models import Client

logger = logging.getLogger(__name__)


class ClientDirectory:
    """
    In-memory directory of registered clients.

    Clients receive sequential ids starting at 1 in registration order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._clients: dict[int, Client] = {}

    def register(self, client: Client) -> Client:
        """
        Register a new client.

        Args:
            client: Client details; any client_id already set is ignored

        Returns:
            The registered Client with its assigned id
        """
        self._validate(client)

        with self._lock:
            registered = replace(client, client_id=next(self._ids))
            self._clients[registered.client_id] = registered

        logger.info("Registered client %s (%s)", registered.client_id, registered.full_name)
        return registered

    def find_client_by_id(self, client_id: int) -> Optional[Client]:
        return self._clients.get(client_id)

    def get_client(self, client_id: int) -> Client:
        """Get client by ID."""
        client = self.find_client_by_id(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    def find_all(self) -> list[Client]:
        """List all clients in registration order."""
        with self._lock:
            return list(self._clients.values())

    @staticmethod
    def _validate(client: Client) -> None:
        if not (client.first_name or "").strip():
            raise ValidationError("Client requires a first name")
        if not (client.last_name or "").strip():
            raise ValidationError("Client requires a last name")
