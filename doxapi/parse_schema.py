"""Declarative parsing rules for Doxygen index and compound documents."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParseSchema:
    """Paths the tree parser must treat specially.

    Paths are dotted element chains from the document root, e.g.
    ``doxygenindex.compound``. A path starting with ``*.`` matches any path
    ending with the rest of it.
    """

    always_list: frozenset[str] = field(default_factory=frozenset)
    raw: frozenset[str] = field(default_factory=frozenset)

    def is_list(self, path: str) -> bool:
        """Return True if elements at this path are always parsed as a list."""
        return _matches(path, self.always_list)

    def is_raw(self, path: str) -> bool:
        """Return True if elements at this path keep their inner markup unparsed."""
        return _matches(path, self.raw)


def _matches(path: str, patterns: frozenset[str]) -> bool:
    if path in patterns:
        return True
    for pattern in patterns:
        if pattern.startswith("*.") and (
            path == pattern[2:] or path.endswith(pattern[1:])
        ):
            return True
    return False


INDEX_SCHEMA = ParseSchema(
    always_list=frozenset(
        {
            "doxygenindex.compound",
            "doxygenindex.compound.member",
        }
    ),
)

COMPOUND_SCHEMA = ParseSchema(
    always_list=frozenset(
        {
            "doxygen.compounddef.basecompoundref",
            "doxygen.compounddef.templateparamlist.param",
            "doxygen.compounddef.sectiondef",
            "doxygen.compounddef.sectiondef.memberdef",
            "doxygen.compounddef.sectiondef.memberdef.enumvalue",
            "doxygen.compounddef.sectiondef.memberdef.param",
            "doxygen.compounddef.listofallmembers.member",
            "*.para",
            "*.para.computeroutput",
            "*.para.programlisting",
            "*.para.programlisting.codeline",
            "*.para.programlisting.codeline.highlight",
            "*.para.parameterlist",
            "*.para.parameterlist.parameteritem",
            "*.para.simplesect",
        }
    ),
    # Type signatures and inline code embed <ref> markup turned into links later.
    raw=frozenset(
        {
            "*.para.computeroutput",
            "doxygen.compounddef.sectiondef.memberdef.type",
            "doxygen.compounddef.sectiondef.memberdef.param.type",
        }
    ),
)
