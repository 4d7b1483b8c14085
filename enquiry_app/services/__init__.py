# enquiry_app/services/__init__.py
# Service layer entry point - re-exports the service classes

from .catalog import CatalogService
from .cart_service import CartService
from .enquiry_service import EnquiryService
from .mail_service import MailService
from .options import OptionStore
from .settings_service import SettingsService

__all__ = [
    "CatalogService",
    "CartService",
    "EnquiryService",
    "MailService",
    "OptionStore",
    "SettingsService",
]
