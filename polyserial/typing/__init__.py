"""
Type Registration Module

This module provides the registry used to resolve abstract declared types into concrete subclasses
during deserialization. The module maintains a stateful, process-wide `registry` object.
"""

from .registration.registry import Registry
from .registration.registration import Registration, ProcessedRegistration
from .registration.parent_options import ParentOptions, parent, set_parent_options, get_parent_options

# Expose these at the module level
from .registration.create_registry import create_registry
from .registration.register_subclasses import register_subclasses
from .serialization.vars import __discriminator__, __parent_options__, get_discriminator_value


# Module-level stateful variable - shared by every serializer which does not bring its own registry
registry: Registry = Registry()
