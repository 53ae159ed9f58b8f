"""Domain initialization and configuration."""

from protean.domain import Domain

from ecommerce.shared.event.dispatcher import EventDispatcher
from ecommerce.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
ecommerce = Domain(name="ecommerce")

# In-process dispatcher for console notifications
dispatcher = EventDispatcher()


def init_domain() -> Domain:
    """Initialize the domain and attach the default console handlers."""
    from ecommerce.shared.event.registry import register_default_handlers

    ecommerce.init()
    register_default_handlers(dispatcher)
    logger.debug("Domain initialized", domain=ecommerce.name)
    return ecommerce
