from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from ..serialization.vars import __parent_options__
from ...utilities.configuration_error import ConfigurationError


T = TypeVar('T', bound=type)

TrackBy = Callable[[Any, Any], Any]
""" Expected function signature: (raw_discriminator_value, value) -> discriminator key """


@dataclass(frozen=True)
class ParentOptions:
	""" Declares a class as a discriminator root.
	The registry reads these once, when the class is first registered as a parent. """
	discriminator_field: str
	""" Name of the field in the serialized value holding the raw discriminator. """

	track_by: TrackBy | None = None
	""" Transforms the raw field value into the lookup key. When unset, the raw value is used as-is. """

	allow_self: bool = False
	""" Whether the parent itself is a valid resolution outcome. """

	def __post_init__(self) -> None:
		if not isinstance(self.discriminator_field, str) or not self.discriminator_field:
			raise ConfigurationError(f"discriminator_field must be a non-empty string, got {self.discriminator_field!r}.")
		if self.track_by is not None and not callable(self.track_by):
			raise ConfigurationError(f"track_by must be callable, got {self.track_by!r}.")


def set_parent_options(cls: type, options: ParentOptions) -> None:
	""" Attach parent options to a class. Use this for classes you cannot decorate, e.g. third-party classes. """
	if not isinstance(cls, type):
		raise ConfigurationError(f"Parent options can only be declared on classes, got {cls!r}.")
	setattr(cls, __parent_options__, options)


def get_parent_options(cls: type) -> ParentOptions | None:
	""" Returns the parent options declared on this class itself, or None.
	Options are looked up in the class's own __dict__, so subclasses of a discriminator root do not inherit them. """
	options = vars(cls).get(__parent_options__)
	if options is not None and not isinstance(options, ParentOptions):
		raise ConfigurationError(f"Class {cls.__name__} has a {__parent_options__} attribute which is not a ParentOptions.")
	return options


def parent(discriminator_field: str, *, track_by: TrackBy | None = None, allow_self: bool = False) -> Callable[[T], T]:
	""" Class decorator that declares a discriminator root.

	Example usage:
		@parent("type")
		class Shape:
			...

		@parent("kind", track_by=lambda raw, value: raw.lower(), allow_self=True)
		class Animal:
			...
	"""
	options = ParentOptions(
		discriminator_field=discriminator_field,
		track_by=track_by,
		allow_self=allow_self
	)

	def decorator(cls: T) -> T:
		set_parent_options(cls, options)
		return cls

	return decorator
