from .codec import quote, to_template_string, unquote
from .formats import DataFormat, decode, encode
from .paths import IndexSegment, KeySegment, PathExpression, Segment, evaluate
from .registry import HelperRegistry, RegisteredHelper
from .signature import HelperSignature, ParamKind, ParamSpec, validate
from .values import Scalar, StructuredValue, kind_of

__all__ = [
    # Formats
    "DataFormat",
    "decode",
    "encode",
    # Paths
    "PathExpression",
    "KeySegment",
    "IndexSegment",
    "Segment",
    "evaluate",
    # Codec
    "to_template_string",
    "quote",
    "unquote",
    # Signatures
    "ParamKind",
    "ParamSpec",
    "HelperSignature",
    "validate",
    # Registry
    "HelperRegistry",
    "RegisteredHelper",
    # Values
    "Scalar",
    "StructuredValue",
    "kind_of",
]
