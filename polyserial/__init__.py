"""
polyserial resolves which concrete subclass to instantiate when deserializing a value declared as a parent class.
"""

from .typing import (
    Registry,
    Registration,
    ProcessedRegistration,
    ParentOptions,
    parent,
    set_parent_options,
    get_parent_options,
    create_registry,
    register_subclasses,
    registry,
)
from .utilities.configuration_error import ConfigurationError
from .utilities.resolution_error import ResolutionError
from .utilities.special_values import AUTO
from .utilities.logger import get_logger, set_logger, set_log_level
