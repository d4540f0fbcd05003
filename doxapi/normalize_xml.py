"""Normalize raw Doxygen XML before parsing."""

import re

BLOCK_CODE_MARKER = "$blockcode"
INLINE_CODE_MARKER = "$inlinecode"

# Doxygen's files are inconsistent with tag naming.
MISSPELLED_CLOSING_TAG_RE = re.compile(r"</detaildescription>")
# \code{.cs} blocks carry a filename attribute.
PROGRAM_LISTING_RE = re.compile(r"\s*(<programlisting[\s>/])")
COMPUTER_OUTPUT_RE = re.compile(r"(<computeroutput[\s>/])")
SPACE_TAG_RE = re.compile(r"<sp\s*/>")


def normalize_xml(text: str) -> str:
    """Fix tag spellings and mark code elements so parsed structure is uniform."""
    text = text.replace("\r", "\n")
    text = MISSPELLED_CLOSING_TAG_RE.sub("</detaileddescription>", text)
    text = PROGRAM_LISTING_RE.sub(lambda m: BLOCK_CODE_MARKER + m.group(1), text)
    text = COMPUTER_OUTPUT_RE.sub(lambda m: INLINE_CODE_MARKER + m.group(1), text)
    # Escaped so the parsed text keeps the HTML entity; &nbsp; is undefined in XML.
    return SPACE_TAG_RE.sub("&amp;nbsp;", text)
