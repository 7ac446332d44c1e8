"""Storefront bounded context: catalogue, checkout and back-office.

Products are managed by the admin back-office, orders are placed from a
client-side cart snapshot, and placed orders drive stock decrements.
Configuration lives in ``domain.toml`` next to this module.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
