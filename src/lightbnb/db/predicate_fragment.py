from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PredicateFragment:
    """One WHERE condition holding a single ``$N`` placeholder and its bound value."""

    condition: str
    value: object
