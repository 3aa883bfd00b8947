from typing import TYPE_CHECKING

from .get_all_subclasses import get_all_subclasses
from .registration import Registration
from ..serialization.vars import __discriminator__
from ...utilities.configuration_error import ConfigurationError
from ...utilities.special_values import AUTO
from ...utilities.logger import get_logger

if TYPE_CHECKING:
	from .registry import Registry


def register_subclasses(registry: 'Registry', root: type) -> list[Registration]:
	""" Uses introspection to register every subclass of root which declares its own __discriminator__.

	Each such subclass is registered as a child of its nearest ancestor that declares ParentOptions, so a
	subclass that is itself decorated with @parent starts a new level of the hierarchy. AUTO uses the class name.

	Example usage:
		@parent("type")
		class Shape: ...

		class Circle(Shape):
			__discriminator__ = "circle"

		@parent("variant")
		class Polygon(Shape):
			__discriminator__ = "polygon"

		class Square(Polygon):
			__discriminator__ = AUTO # -> "Square"

		register_subclasses(registry, Shape)

	Returns the registrations that were added, in the order they were passed to Registry.add().
	"""
	registrations: dict[type, Registration] = {}

	for subclass in get_all_subclasses(root):
		# Only the class which declares the discriminator is registered, not the classes inheriting it
		if __discriminator__ not in vars(subclass):
			continue

		discriminator = vars(subclass)[__discriminator__]
		if discriminator == AUTO:
			discriminator = subclass.__name__
		if not isinstance(discriminator, str) or not discriminator:
			raise ConfigurationError(f"{subclass.__name__} declares an invalid {__discriminator__} {discriminator!r}.")

		discriminator_root = _find_discriminator_root(registry, subclass, root)
		registration = registrations.setdefault(discriminator_root, Registration(parent=discriminator_root, children={}))
		# Within one scan a discriminator must be unique per root, otherwise one of the classes could never be resolved
		claimed_by = registration.children.get(discriminator)
		if claimed_by is not None and claimed_by is not subclass:
			raise ConfigurationError(f"{subclass.__name__} uses a duplicate {__discriminator__} '{discriminator}' already used by {claimed_by.__name__} under {discriminator_root.__name__}!")
		registration.children[discriminator] = subclass

	added = list(registrations.values())
	registry.add(added)

	get_logger().debug(f"Discovered {sum(len(registration.children) for registration in added)} subclasses of {root.__name__}.")
	return added


def _find_discriminator_root(registry: 'Registry', cls: type, root: type) -> type:
	""" Returns the nearest proper ancestor of cls, within root's hierarchy, that declares ParentOptions. """
	for ancestor in cls.__mro__[1:]:
		if not issubclass(ancestor, root):
			continue
		if registry.options_lookup(ancestor) is not None:
			return ancestor
	raise ConfigurationError(f"{cls.__name__} declares a {__discriminator__} but none of its ancestors within {root.__name__} declare parent options.")
