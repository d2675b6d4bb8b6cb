import abc as _abc
import re as _re
import typing as _ty

from ..options import ArrayFormat, StringifyOptions
from .encoding import Scalar, encode

Value: _ty.TypeAlias = str | None
Accumulator: _ty.TypeAlias = "dict[str, Value | list[Value] | IndexedValues]"


class IndexedValues(dict[str, Value]):
    """Values of an ``index`` formatted key, keyed by their index string.

    Only lives while a query is being parsed, the key sorter turns it into
    a list ordered by index."""

    __slots__ = ()


class ArrayFormatter(_abc.ABC):
    __slots__ = ()
    format: _ty.ClassVar[ArrayFormat]

    @_abc.abstractmethod
    def encode_entry(
        self, key: str, value: Scalar | None, index: int, options: StringifyOptions
    ) -> str: ...

    @_abc.abstractmethod
    def decode_entry(self, key: str, value: Value, accumulator: Accumulator): ...

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.format.value)


class RepeatFormatter(ArrayFormatter):
    """``foo=1&foo=2``"""

    __slots__ = ()
    format = ArrayFormat.NONE

    def encode_entry(self, key, value, index, options):
        if value is None:
            return encode(key, options)
        return f"{encode(key, options)}={encode(value, options)}"

    def decode_entry(self, key, value, accumulator):
        if key not in accumulator:
            accumulator[key] = value
        else:
            _append(accumulator, key, value)


class BracketFormatter(ArrayFormatter):
    """``foo[]=1&foo[]=2``"""

    __slots__ = ()
    format = ArrayFormat.BRACKET
    SUFFIX = "[]"

    def encode_entry(self, key, value, index, options):
        if value is None:
            return encode(key, options)
        return f"{encode(key, options)}{self.SUFFIX}={encode(value, options)}"

    def decode_entry(self, key, value, accumulator):
        if not key.endswith(self.SUFFIX):
            accumulator[key] = value
            return
        key = key.removesuffix(self.SUFFIX)
        if key not in accumulator:
            accumulator[key] = [value]
        else:
            _append(accumulator, key, value)


class IndexFormatter(ArrayFormatter):
    """``foo[0]=1&foo[1]=2``"""

    __slots__ = ()
    format = ArrayFormat.INDEX
    PATTERN = _re.compile(r"\[([0-9]*)\]\Z")

    def encode_entry(self, key, value, index, options):
        if value is None:
            return f"{encode(key, options)}[{index}]"
        return f"{encode(key, options)}[{encode(index, options)}]={encode(value, options)}"

    def decode_entry(self, key, value, accumulator):
        match = self.PATTERN.search(key)
        if match is None:
            accumulator[key] = value
            return
        key = key[: match.start()]
        values = accumulator.get(key)
        if not isinstance(values, IndexedValues):
            # a plain value seen earlier under the same key is dropped
            values = accumulator[key] = IndexedValues()
        values[match.group(1)] = value


def _append(accumulator: Accumulator, key: str, value: Value):
    current = accumulator[key]
    if isinstance(current, list):
        current.append(value)
    else:
        accumulator[key] = [current, value]


_FORMATTERS: _ty.Mapping[ArrayFormat, ArrayFormatter] = {
    formatter.format: formatter
    for formatter in (RepeatFormatter(), BracketFormatter(), IndexFormatter())
}


def formatter_for(array_format: ArrayFormat | str | None) -> ArrayFormatter:
    return _FORMATTERS[ArrayFormat.coerce(array_format)]
