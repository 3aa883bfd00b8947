from bidict import bidict


class TypeNameDict(bidict[str, type]):
    """ Maps class names to classes for every class the registry has seen.
    A later class with the same __name__ replaces the earlier entry. """

    def add(self, type_: type) -> None:
        """Register a single type by its name."""
        # A bidict rejects a value already stored under another key, so drop the stale name first
        if type_ in self.inverse:
            del self.inverse[type_]
        self[type_.__name__] = type_

    def add_list(self, types: list[type]) -> None:
        """Register multiple types by their names."""
        for type_ in types:
            self.add(type_)

    def name_of(self, type_: type) -> str | None:
        """ Return the name the type is registered under. """
        return self.inverse.get(type_)
