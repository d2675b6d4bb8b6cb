import logging as _logging
import typing as _ty
import uritools as _uritools

from ..options import ParseOptions, StringifyOptions, resolve as _resolve
from .encoding import decode, encode
from .formats import Accumulator, IndexedValues, Value, formatter_for
from .sorter import sort_keys

LOGGER = _logging.getLogger(__name__)

QueryDict: _ty.TypeAlias = dict[str, Value | list[Value]]

_PREFIXES = ("?", "#", "&")


class _Omit(object):
    __slots__ = ()

    def __repr__(self):
        return "OMIT"

    def __bool__(self):
        return False

    def __reduce__(self):
        return "OMIT"


OMIT = _Omit()
"""Marks a value that :func:`stringify` leaves out of the query."""


class ParsedUrl(_ty.NamedTuple):
    url: str
    query: QueryDict


def extract(url: str) -> str:
    """Return what follows the first ``?`` of ``url``.

    >>> extract("http://foo.bar/?abc=def&hij=klm")
    'abc=def&hij=klm'
    """
    if not isinstance(url, str):
        return ""
    _, _, query = url.partition("?")
    return query


def parse(
    query: str,
    options: ParseOptions | _ty.Mapping[str, _ty.Any] | None = None,
    /,
    **overrides,
) -> QueryDict:
    options = _resolve(ParseOptions, options, **overrides)
    if not isinstance(query, str):
        return {}
    query = query.strip()
    if query.startswith(_PREFIXES):
        query = query[1:]
    if not query:
        return {}

    formatter = formatter_for(options.array_format)
    accumulator: Accumulator = {}
    pairs = query.split("&")
    for pair in pairs:
        key, sep, value = pair.replace("+", " ").partition("=")
        formatter.decode_entry(
            decode(key, options.errors),
            decode(value, options.errors) if sep else None,
            accumulator,
        )
    LOGGER.debug(
        "Parsed %d pairs into %d keys with %r",
        len(pairs),
        len(accumulator),
        formatter,
    )

    result: QueryDict = {}
    for key in sorted(accumulator):
        value = accumulator[key]
        result[key] = sort_keys(value) if isinstance(value, IndexedValues) else value
    return result


def stringify(
    mapping: _ty.Mapping[str, _ty.Any] | None,
    options: StringifyOptions | _ty.Mapping[str, _ty.Any] | None = None,
    /,
    **overrides,
) -> str:
    options = _resolve(StringifyOptions, options, **overrides)
    if not mapping:
        return ""
    formatter = formatter_for(options.array_format)

    fragments: list[str] = []
    for key in sorted(mapping):
        value = mapping[key]
        if value is OMIT:
            continue
        if value is None:
            fragments.append(encode(key, options))
        elif isinstance(value, (list, tuple)):
            entries: list[str] = []
            for item in value:
                if item is OMIT:
                    continue
                entries.append(formatter.encode_entry(key, item, len(entries), options))
            fragments.append("&".join(entries))
        else:
            fragments.append(f"{encode(key, options)}={encode(value, options)}")

    fragments = [fragment for fragment in fragments if fragment]
    LOGGER.debug("Stringified %d keys with %r", len(fragments), formatter)
    return "&".join(fragments)


def parse_url(
    url: str,
    options: ParseOptions | _ty.Mapping[str, _ty.Any] | None = None,
    /,
    **overrides,
) -> ParsedUrl:
    """Split ``url`` into the part before its query and the parsed query.

    The fragment is not part of either.
    """
    if not isinstance(url, str):
        return ParsedUrl("", {})
    url, _ = _uritools.uridefrag(url)
    url, _, query = url.partition("?")
    return ParsedUrl(url, parse(query, options, **overrides))
