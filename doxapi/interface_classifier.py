"""Decide whether a base compound reference names an interface."""

import re

from doxapi.models import Reference

DEFAULT_ID_PREFIX = "interface_"
DEFAULT_NAME_PATTERN = r"^I[A-Z]\w+"


class InterfaceClassifier:
    """Classifies base references as implemented interfaces or inherited types.

    Interfaces defined in the project have a refid starting with ``id_prefix``.
    Doxygen has no data for externally defined bases, so a reference without
    an id is assumed to be an interface when its name matches
    ``name_pattern`` (``IDisposable``, ``IEnumerable``...).
    """

    def __init__(
        self,
        id_prefix: str = DEFAULT_ID_PREFIX,
        name_pattern: str = DEFAULT_NAME_PATTERN,
    ) -> None:
        """Initialize the classifier with an id prefix and a naming convention."""
        self.id_prefix = id_prefix
        self.name_re = re.compile(name_pattern)

    def __call__(self, reference: Reference) -> bool:
        """Return True if the reference should be listed under ``implements``."""
        if reference.id:
            return reference.id.startswith(self.id_prefix)
        return bool(self.name_re.match(reference.name))
