"""Link methods that share a name within one scope."""

from collections.abc import Iterable

from doxapi.models import Method, Reference


def group_overloads(
    members: Iterable[object], tracked: dict[str, list[Reference]]
) -> None:
    """Fill ``overloads`` for every method whose name has 2+ tracked references.

    ``tracked`` maps a name to references of the methods emitted under it.
    A method never lists itself.
    """
    for member in members:
        if not isinstance(member, Method):
            continue
        group = tracked.get(member.name)
        if not group or len(group) < 2:
            continue
        member.overloads.extend(ref for ref in group if ref.id != member.id)
