from collections.abc import Iterable
from typing import Callable

from .parent_options import ParentOptions, get_parent_options
from .register_subclasses import register_subclasses
from .registration import Registration
from .registry import Registry
from ...utilities.logger import get_logger


def create_registry(
		registrations: Iterable[Registration] | None = None,
		*,
		roots: Iterable[type] | None = None,
		options_lookup: Callable[[type], ParentOptions | None] | None = None
	) -> Registry:
	""" Builds a new Registry.
	Explicit registrations are added first, then the subclasses of each root declaring a __discriminator__ are discovered.
	Call this after all relevant classes are imported, since discovery only sees classes which already exist. """
	
	get_logger().debug("Creating registry...")

	registry = Registry(options_lookup=options_lookup or get_parent_options)

	if registrations is not None:
		registry.add(registrations)
	
	for root in roots or ():
		register_subclasses(registry, root)
	
	get_logger().debug(f"Registered parents: {', '.join(cls.__name__ for cls in registry.parents())}")
	return registry
