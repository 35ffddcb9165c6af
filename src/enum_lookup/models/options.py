"""Lookup options model.

EnumOptions bundles the four independent knobs of the equality engine.
Options are immutable; every lookup function accepts them as an EnumOptions
instance, as a plain mapping, or as keyword arguments.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel, to_snake

from enum_lookup.core.exceptions import InvalidOptionsError
from enum_lookup.models.base import Normalizer, TypeConverter


class EnumOptions(BaseModel):
    """Configuration for comparing enum keys and values.

    Attributes:
        normalize: Applied first, to both sides of every comparison
        ignore_case: Lower-case strings after conversion (strings only)
        convert: Coerce both sides to the enum side's type before comparing
        converter: Replaces the default coercion when convert is set
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    normalize: Optional[Normalizer] = Field(default=None)
    ignore_case: bool = Field(default=False)
    convert: bool = Field(default=False)
    converter: Optional[TypeConverter] = Field(default=None)


OptionsInput = Union[EnumOptions, Mapping[str, Any], None]

DEFAULT_OPTIONS = EnumOptions()


def resolve_options(options: OptionsInput = None, **overrides: Any) -> EnumOptions:
    """Build an EnumOptions from the accepted option spellings.

    Args:
        options: EnumOptions instance, mapping of option names, or None
        **overrides: Individual options; these win over ``options``

    Returns:
        EnumOptions instance

    Raises:
        InvalidOptionsError: If an option name is unknown or a value has the wrong type
    """
    if isinstance(options, EnumOptions) and not overrides:
        return options
    if options is None and not overrides:
        return DEFAULT_OPTIONS

    fields: Dict[str, Any] = {}
    if isinstance(options, EnumOptions):
        fields.update({name: getattr(options, name) for name in EnumOptions.model_fields})
    elif isinstance(options, Mapping):
        fields.update({to_snake(str(name)): value for name, value in options.items()})
    elif options is not None:
        raise InvalidOptionsError(
            f"Options must be an EnumOptions instance or a mapping, got {type(options).__name__}"
        )
    fields.update({to_snake(name): value for name, value in overrides.items()})

    try:
        return EnumOptions.model_validate(fields)
    except ValidationError as e:
        raise InvalidOptionsError(f"Invalid enum options: {e}") from e
