import typing as _ty
import uritools as _uritools

from . import codec as _codec
from .errors import QueryDecodeError
from .options import ParseOptions, StringifyOptions


class Query(str):
    SEPARATOR = "&"
    ENCODING = "utf-8"

    def __new__(
        cls,
        query: str | _ty.Mapping[str, _ty.Any] = "",
        options: StringifyOptions | _ty.Mapping[str, _ty.Any] | None = None,
        /,
        **overrides,
    ):
        if isinstance(query, str):
            query = query.removeprefix("?")
        elif isinstance(query, _ty.Mapping):
            query = _codec.stringify(query, options, **overrides)
        else:
            raise TypeError(
                f"query should be a str or a mapping, not {type(query).__name__!r}"
            )
        return str.__new__(cls, query)

    @classmethod
    def from_url(cls, url: str):
        return cls(_codec.extract(url))

    def decode(query, errors: str = "strict") -> list[tuple[str, str | None]]:
        """Decoded ``(key, value)`` pairs in the order they appear, with no
        array format applied."""
        split = _uritools.SplitResultString(
            "", "", "", str(query).replace("+", " "), ""
        )
        try:
            return split.getquerylist(query.SEPARATOR, query.ENCODING, errors)
        except UnicodeError as _e:
            raise QueryDecodeError(str(query), _e.reason) from _e

    def to_dict(
        query,
        options: ParseOptions | _ty.Mapping[str, _ty.Any] | None = None,
        /,
        **overrides,
    ):
        return _codec.parse(str(query), options, **overrides)
