"""assistcheck - static validation of assisted-injection declarations."""

__version__ = "0.1.0"

from assistcheck.application.services.processor import AssistedInjectProcessor
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.markers import Assisted, Named, assisted_factory, assisted_inject

__all__ = [
    "Assisted",
    "AssistedInjectProcessor",
    "Named",
    "ProcessorConfig",
    "__version__",
    "assisted_factory",
    "assisted_inject",
]
