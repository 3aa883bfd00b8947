from typing import TypeVar


T = TypeVar('T')

def get_all_subclasses(cls: type[T]) -> list[type[T]]:
    """Get all subclasses of a class, including indirect subclasses.
    
    Subclasses are returned parents-first (depth first, in definition order), and each class only once even
    when it is reachable through several bases.
    """
    subclasses: list[type[T]] = []
    seen: set[type] = set()

    def visit(current: type) -> None:
        for subclass in current.__subclasses__():
            if subclass in seen:
                continue
            seen.add(subclass)
            subclasses.append(subclass)
            # Recursively get subclasses of this subclass
            visit(subclass)

    visit(cls)
    return subclasses
