from collections.abc import Mapping
from typing import Any


__parent_options__ = "__parent_options__"
__discriminator__ = "__discriminator__"


class Undefined:
	""" Stands in for a discriminator field which is absent from the value, as opposed to one explicitly set to None.
	Only get_discriminator_value produces it. track_by callbacks are given None instead. """
	_instance = None

	def __new__(cls):
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self):
		return "UNDEFINED"

	def __bool__(self):
		return False

UNDEFINED = Undefined()


def get_discriminator_value(value: Any, discriminator_field: str) -> Any:
	""" Get the raw discriminator from the value. Returns UNDEFINED if the field is absent.
	Mappings (decoded json/bson documents) are read by key, anything else by attribute. """
	
	if isinstance(value, Mapping):
		return value.get(discriminator_field, UNDEFINED)
	
	return getattr(value, discriminator_field, UNDEFINED)

def is_missing(discriminator_value: Any) -> bool:
	""" A discriminator counts as missing when the field is absent or explicitly null. """
	return discriminator_value is UNDEFINED or discriminator_value is None
