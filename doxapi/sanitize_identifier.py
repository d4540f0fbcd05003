"""Strip generic parameters and indexer names from identifiers."""

import re

# Innermost segment first, so nested generics strip one level per pass.
GENERIC_SEGMENT_RE = re.compile(r"\s*<[^<>]*>\s*")
INDEXER_PARAMS_RE = re.compile(r"\s*\[([^\]]*)\]")


def _indexer_types(match: re.Match) -> str:
    types = []
    for param in match.group(1).split(","):
        words = param.split()
        # "int index" -> "int"; a lone type is kept as is.
        types.append(" ".join(words[:-1]) if len(words) > 1 else "".join(words))
    return "[" + ", ".join(types) + "]"


def sanitize_identifier(identifier: str) -> str:
    """Strip type parameters and indexer names from an identifier.

    ``List< T >`` becomes ``List``, ``Pool< T >.Node< U >`` becomes
    ``Pool.Node`` and ``this[int x, int y]`` becomes ``this[int, int]``.
    """
    previous = None
    while previous != identifier:
        previous = identifier
        identifier = GENERIC_SEGMENT_RE.sub("", identifier)
    return INDEXER_PARAMS_RE.sub(_indexer_types, identifier)
