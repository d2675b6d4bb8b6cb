import functools as _func
import typing as _ty

from .formats import IndexedValues, Value


@_func.singledispatch
def sort_keys(value: _ty.Any) -> _ty.Any:
    """Canonical ordering of a parsed value.

    Lists come back sorted with ``None`` ahead of every string, ``index``
    sub-mappings come back as a list ordered by index and anything else
    is returned untouched.
    """
    return value


@sort_keys.register(list)
@sort_keys.register(tuple)
def _(value: _ty.Sequence[Value]) -> list[Value]:
    return sorted(value, key=_value_order)


@sort_keys.register
def _(value: IndexedValues) -> list[Value]:
    indexes = sorted(sorted(value), key=_index_order)
    return [value[index] for index in indexes]


def _value_order(value: Value):
    return (value is not None, value or "")


def _index_order(index: str) -> int:
    return int(index) if index else 0
