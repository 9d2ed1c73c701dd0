"""domwait: async waits for element removal in a document tree."""

from domwait.config.runtime_config import configure, configure_logging, get_config, reset_config
from domwait.core.errors import (
    DomWaitError,
    ElementLookupError,
    ElementNotFoundError,
    MultipleElementsFoundError,
    WaitTimeoutError,
    WaitValidationError,
)
from domwait.core.models.options import MutationObserverOptions, WaitConfig
from domwait.core.wait_for import wait_for
from domwait.core.wait_for_removal import wait_for_element_to_be_removed
from domwait.dom import Document, Element, MutationObserver, Text, parse_html, within

__all__ = [
    "configure",
    "configure_logging",
    "get_config",
    "reset_config",
    "DomWaitError",
    "ElementLookupError",
    "ElementNotFoundError",
    "MultipleElementsFoundError",
    "WaitTimeoutError",
    "WaitValidationError",
    "MutationObserverOptions",
    "WaitConfig",
    "wait_for",
    "wait_for_element_to_be_removed",
    "Document",
    "Element",
    "MutationObserver",
    "Text",
    "parse_html",
    "within",
]
__version__ = "0.1.0"
