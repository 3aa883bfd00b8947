from collections.abc import Iterable
from threading import RLock
from types import MappingProxyType
from typing import Any, Callable

from .parent_options import ParentOptions, get_parent_options
from .registration import ProcessedRegistration, Registration
from .type_name_dict import TypeNameDict
from ..serialization.vars import UNDEFINED, get_discriminator_value, is_missing
from ...utilities.configuration_error import ConfigurationError
from ...utilities.resolution_error import ResolutionError
from ...utilities.logger import get_logger


class Registry:
	""" Resolves the concrete class to instantiate for a value whose declared type is a parent class.

	Example usage:
		@parent("type")
		class Shape: ...
		class Circle(Shape): ...
		class Square(Shape): ...

		registry = Registry()
		registry.add([
			Registration(parent=Shape, children={"circle": Circle, "square": Square})
		])
		registry.find_class(Shape, {"type": "circle", "radius": 2}) # -> Circle

	Hierarchies can be extended at any time: adding another Registration for Shape merges its children
	into the existing ones, and a child can itself be registered as a parent to resolve a deeper level
	from the same value.
	"""

	def __init__(self, *, options_lookup: Callable[[type], ParentOptions | None] = get_parent_options) -> None:
		self._registrations: dict[type, ProcessedRegistration] = {}
		self.options_lookup = options_lookup
		""" Reads the ParentOptions declared on a class. Replace it to keep the options in a side table instead. """
		self._lock = RLock()
		self.type_name_dict = TypeNameDict()
		""" Every parent and child class seen so far, by name. """

	def add(self, registrations: Iterable[Registration]) -> None:
		""" Adds the given registrations to the registry.

		Registrations for a parent that is already known are merged into it: incoming children win on key
		collisions, while the parent options from the first registration are kept.

		Raises:
			ConfigurationError: If a handler declares no ParentOptions, or a child is neither a subclass of its
				parent nor the parent itself with allow_self. Nothing from the call is applied in that case.
		"""
		with self._lock:
			staged: dict[type, ProcessedRegistration] = {}
			for registration in registrations:
				existing = staged.get(registration.parent) or self._registrations.get(registration.parent)
				staged[registration.parent] = self._process(registration, existing)

			# Every registration validated, so commit them together
			self._registrations.update(staged)
			for processed in staged.values():
				self.type_name_dict.add(processed.parent)
				self.type_name_dict.add_list(list(processed.children.values()))
				get_logger().debug(f"Registered {processed}")

	def _process(self, registration: Registration, existing: ProcessedRegistration | None) -> ProcessedRegistration:
		""" Merge a registration into the existing state for its parent, validating the incoming children. """
		parent = registration.parent
		if not isinstance(parent, type):
			raise ConfigurationError(f"Registration parent must be a class, got {parent!r}.")

		incoming_children = {str(key): child for key, child in registration.children.items()}

		# Merge with the previous registration, re-using its options. The handler is not consulted again.
		if existing is not None:
			children = {**existing.children, **incoming_children}
			parent_options = existing.parent_options
			parent_has_explicit_discriminator = existing.parent_has_explicit_discriminator
		else:
			children = incoming_children
			discriminator_handler = registration.discriminator_handler or parent
			if not isinstance(discriminator_handler, type):
				raise ConfigurationError(f"Discriminator handler for {parent.__name__} must be a class, got {discriminator_handler!r}.")
			parent_options = self.options_lookup(discriminator_handler)
			if parent_options is None:
				raise ConfigurationError(f"Class {discriminator_handler.__name__} needs parent options (see @parent) to be registered.")
			parent_has_explicit_discriminator = False

		for key, child in incoming_children.items():
			if not isinstance(child, type):
				raise ConfigurationError(f"Child {child!r} registered under '{key}' for {parent.__name__} is not a class.")

			# The parent may only be among its own children when it allows itself
			if child is parent:
				if not parent_options.allow_self:
					raise ConfigurationError(f"Class {parent.__name__} cannot be registered among its children.")
				parent_has_explicit_discriminator = True

			elif not issubclass(child, parent):
				raise ConfigurationError(f"Class {child.__name__} needs to extend {parent.__name__} to be registered as a child.")

		return ProcessedRegistration(
			parent=parent,
			children=MappingProxyType(children),
			parent_options=parent_options,
			parent_has_explicit_discriminator=parent_has_explicit_discriminator
		)

	def find_class(self, cls: type, value: Any) -> type:
		""" Use the ParentOptions of cls in combination with the registrations to find the class for the given value.
		Classes that were never registered as a parent are returned unchanged.

		Raises:
			ResolutionError: If the discriminator is missing and cls cannot resolve to itself, or if no child is
				registered for the discriminator value.
		"""
		registration = self._registrations.get(cls)

		# If we don't have a registration for this class, it isn't polymorphic.
		if registration is None:
			return cls

		parent_options = registration.parent_options
		raw_value = get_discriminator_value(value, parent_options.discriminator_field)

		if parent_options.track_by is None:
			discriminator_value = raw_value
		else:
			discriminator_value = parent_options.track_by(None if raw_value is UNDEFINED else raw_value, value)

		# In case of a missing discriminator, the parent can only resolve to itself if no child claims its slot.
		if is_missing(discriminator_value):
			if not parent_options.allow_self or registration.parent_has_explicit_discriminator:
				raise ResolutionError(
					f"Missing attribute '{parent_options.discriminator_field}' to discriminate the subclass of {cls.__name__}.",
					parent=cls
				)
			get_logger().debug(f"No discriminator for {cls.__name__}, resolving to itself.")
			return cls

		return self._get_child(registration, value, str(discriminator_value))

	resolve = find_class

	def _get_child(self, registration: ProcessedRegistration, value: Any, discriminator_value: str) -> type:
		""" Look up the child for the discriminator value and keep descending from it with the same value. """
		child = registration.children.get(discriminator_value)

		if child is None:
			raise ResolutionError(
				f"No matching subclass for parent class {registration.parent.__name__} with discriminator value '{discriminator_value}'.",
				parent=registration.parent,
				discriminator_value=discriminator_value
			)

		if child is registration.parent:
			return child

		get_logger().debug(f"Resolved {registration.parent.__name__} to {child.__name__} with discriminator value '{discriminator_value}'.")
		return self.find_class(child, value)

	def __contains__(self, cls: object) -> bool:
		return cls in self._registrations

	def parents(self) -> list[type]:
		""" Returns every registered parent, in the order they were first registered. """
		with self._lock:
			return list(self._registrations)

	def get_registration(self, cls: type) -> ProcessedRegistration | None:
		""" Returns the merged registration for a parent, or None if it was never registered. """
		return self._registrations.get(cls)

	def children_of(self, cls: type) -> dict[str, type]:
		""" Returns a copy of the children registered directly under cls. """
		registration = self._registrations.get(cls)
		if registration is None:
			return {}
		return dict(registration.children)

	def discriminator_for(self, parent: type, child: type) -> str | None:
		""" The discriminator key a serializer should write for child when the declared type is parent.
		If child is registered under several keys, the earliest key wins. """
		for key, registered_child in self.children_of(parent).items():
			if registered_child is child:
				return key
		return None

	def lookup_type_by_name(self, name: str) -> type | None:
		""" Returns None if no registered class has this name. """
		return self.type_name_dict.get(name)
