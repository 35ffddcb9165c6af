"""Base types used across features."""

import enum
from typing import Any, Callable, Literal, Mapping, Type, Union

# A single enum value: text or a number (bool excluded at runtime)
EnumValue = Union[str, int, float]

# Anything the structural validator accepts as an enum-like source
EnumLike = Union[Mapping[str, EnumValue], Type[enum.Enum], Any]

# Custom conversion hook; None means the conversion failed
TypeConverter = Callable[[Any], Union[str, int, float, None]]

Normalizer = Callable[[Any], Any]

ExpectedType = Literal["string", "number"]
