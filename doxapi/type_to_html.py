"""Turn Doxygen type signature markup into HTML with id placeholders."""

import re

REF_RE = re.compile(r'<ref\s+refid="(\w+)"[^>]*>(\w+)</ref>')


def type_to_html(signature: str) -> str:
    """Replace ``<ref refid="ID">Name</ref>`` with ``<a href="ID">Name</a>``.

    The renderer swaps the id in ``href`` for the target page's URL.
    """
    return REF_RE.sub(r'<a href="\1">\2</a>', signature)
