from collections.abc import Mapping
from dataclasses import dataclass, field

from .parent_options import ParentOptions


@dataclass
class Registration:
	""" Declares parent -> children relationships. Registering the same parent again merges the children.

	Example usage:
		Registration(
			parent=Shape,
			children={
				"circle": Circle,
				"square": Square,
			}
		)
	"""
	parent: type
	children: Mapping[str, type] = field(default_factory=dict)
	""" Maps discriminator keys to classes. Keys are stored as strings. """

	discriminator_handler: type | None = None
	""" Class to read the ParentOptions from instead of parent. Only used the first time parent is registered. """


@dataclass(frozen=True)
class ProcessedRegistration:
	""" The merged state the registry keeps for a single parent. Replaced as a whole on every merge. """
	parent: type
	children: Mapping[str, type]
	""" Read-only view. Merges build a new mapping rather than editing this one. """
	parent_options: ParentOptions
	parent_has_explicit_discriminator: bool
	""" True once the parent has been registered among its own children. Never reset by later merges. """

	def __str__(self) -> str:
		children_str = ", ".join(f"{key!r}: {child.__name__}" for key, child in self.children.items())
		return f"{self.parent.__name__}({self.parent_options.discriminator_field}) -> {{{children_str}}}"
