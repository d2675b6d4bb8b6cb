import enum as _enum
import logging as _logging
import typing as _ty

LOGGER = _logging.getLogger(__name__)

_ALIASES = {"arrayFormat": "array_format"}


class ArrayFormat(_enum.Enum):
    """How a key carrying several values is written on the wire."""

    NONE = "none"
    BRACKET = "bracket"
    INDEX = "index"

    @classmethod
    def coerce(cls, value: "ArrayFormat | str | None") -> "ArrayFormat":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            LOGGER.warning("Unknown array format %r, falling back to 'none'", value)
            return cls.NONE


class ParseOptions(_ty.NamedTuple):
    array_format: ArrayFormat = ArrayFormat.NONE
    errors: str = "strict"


class StringifyOptions(_ty.NamedTuple):
    encode: bool = True
    strict: bool = True
    array_format: ArrayFormat = ArrayFormat.NONE


_O = _ty.TypeVar("_O", ParseOptions, StringifyOptions)


def resolve(
    cls: type[_O],
    options: "_O | _ty.Mapping[str, _ty.Any] | None" = None,
    /,
    **overrides: _ty.Any,
) -> _O:
    """Build a ``cls`` instance from an options object or mapping plus
    keyword overrides. ``array_format`` is always coerced to an
    :class:`ArrayFormat`."""
    if options is None:
        resolved = cls()
    elif isinstance(options, cls):
        resolved = options
    elif isinstance(options, _ty.Mapping):
        resolved = cls()._replace(**_normalize(options))
    else:
        raise TypeError(
            f"options should be a {cls.__name__} or a mapping, "
            f"not {type(options).__name__!r}"
        )
    if overrides:
        resolved = resolved._replace(**_normalize(overrides))
    array_format = ArrayFormat.coerce(resolved.array_format)
    if array_format is not resolved.array_format:
        resolved = resolved._replace(array_format=array_format)
    return resolved


def _normalize(options: _ty.Mapping[str, _ty.Any]) -> dict[str, _ty.Any]:
    return {_ALIASES.get(name, name): value for name, value in options.items()}
