import typing as _ty
import uritools as _uritools

from ..errors import QueryDecodeError
from ..options import StringifyOptions

# Left alone by the usual URI component encoder, escaped in strict mode.
COMPONENT_SAFE = "!'()*"

Scalar: _ty.TypeAlias = str | int | float | bool


def to_text(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def encode(value: Scalar, options: StringifyOptions) -> str:
    value = to_text(value)
    if not options.encode:
        return value
    safe = "" if options.strict else COMPONENT_SAFE
    return _uritools.uriencode(value, safe=safe).decode("ascii")


def decode(value: str, errors: str = "strict") -> str:
    """Percent-decode ``value``.

    Escapes that are not two hex digits are kept as they are. Text that
    is not valid UTF-8, before or after decoding, raises
    :class:`QueryDecodeError` under ``errors="strict"``; any other codec
    error handler is applied as is.
    """
    try:
        return _uritools.uridecode(value, errors=errors)
    except UnicodeError as _e:
        raise QueryDecodeError(value, _e.reason) from _e
