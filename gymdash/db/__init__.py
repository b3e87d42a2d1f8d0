from .backend import BackendClient, BackendError, get_backend_client
from .repository import GymRepository, InMemoryGymRepository

__all__ = [
    "BackendClient",
    "BackendError",
    "GymRepository",
    "InMemoryGymRepository",
    "get_backend_client",
]
