"""
Base API client abstract class.

Defines the three verbs every Lob client exposes.
"""
from abc import ABC, abstractmethod


class APIClient(ABC):
    """Abstract base class for Lob API clients.

    ``params`` is either a wire form (mapping of wire name to string) or a
    LobRecord, which is encoded before sending. ``response_model`` is an
    optional pydantic model class to decode the JSON body into.
    """

    @abstractmethod
    def get(self, resource, params=None, response_model=None, operation=None):
        """Make GET request to API resource."""
        pass

    @abstractmethod
    def post(self, resource, params=None, response_model=None, operation=None):
        """Make POST request to API resource."""
        pass

    @abstractmethod
    def delete(self, resource, response_model=None, operation=None):
        """Make DELETE request to API resource."""
        pass
