from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AssembledQuery:
    """Final statement text and the values for ``$1``..``$N`` in order."""

    statement: str
    params: tuple[object, ...]
