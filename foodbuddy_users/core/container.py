from dataclasses import dataclass

from ..application.services.account_service import AccountService
from ..application.services.address_service import AddressService
from .config import Settings
from ..domain.ports.persistence import PersistenceGateway


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    persistence: PersistenceGateway
    account_service: AccountService
    address_service: AddressService
