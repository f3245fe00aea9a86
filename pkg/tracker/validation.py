"""
Field validation for submitted projects.

Each field is described by a Validatable: the raw value plus whichever
constraints apply to it. Length constraints only look at strings and
range constraints only look at numbers; a constraint that does not match
the value's type is skipped, not failed.
"""
from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]


@dataclass
class Validatable:
    """A single field value and the constraints it must satisfy."""
    value: Union[str, Number]
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[Number] = None
    max: Optional[Number] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate(validatable: Validatable) -> bool:
    """Return True if every applicable constraint holds."""
    value = validatable.value
    is_valid = True

    if validatable.required:
        is_valid = is_valid and len(str(value).strip()) != 0
    if validatable.min_length is not None and isinstance(value, str):
        is_valid = is_valid and len(value) >= validatable.min_length
    if validatable.max_length is not None and isinstance(value, str):
        is_valid = is_valid and len(value) <= validatable.max_length
    if validatable.min is not None and _is_number(value):
        is_valid = is_valid and value >= validatable.min
    if validatable.max is not None and _is_number(value):
        is_valid = is_valid and value <= validatable.max

    return is_valid


def validate_all(*validatables: Validatable) -> bool:
    """AND-combine several fields into one accept/reject decision."""
    return all(validate(v) for v in validatables)
