from .codec import OMIT, ParsedUrl, extract, parse, parse_url, stringify
from .errors import QueryDecodeError
from .options import ArrayFormat, ParseOptions, StringifyOptions
from .query import Query

__all__ = (
    "OMIT",
    "ArrayFormat",
    "ParseOptions",
    "ParsedUrl",
    "Query",
    "QueryDecodeError",
    "StringifyOptions",
    "extract",
    "parse",
    "parse_url",
    "stringify",
)
