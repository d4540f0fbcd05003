"""Tests for XML normalization."""

from doxapi.normalize_xml import BLOCK_CODE_MARKER, INLINE_CODE_MARKER, normalize_xml


def test_fixes_misspelled_closing_tag() -> None:
    """Verify the misspelled detailed description closing tag is corrected."""
    xml = "<detaileddescription><para>x</para></detaildescription>"
    assert normalize_xml(xml) == (
        "<detaileddescription><para>x</para></detaileddescription>"
    )


def test_marks_block_code() -> None:
    """Verify a marker replaces whitespace before program listings."""
    xml = "<para>Example:\n  <programlisting></programlisting></para>"
    assert normalize_xml(xml) == (
        f"<para>Example:{BLOCK_CODE_MARKER}<programlisting></programlisting></para>"
    )


def test_marks_inline_code() -> None:
    """Verify a marker is inserted before inline code."""
    xml = "<para>Call <computeroutput>Foo()</computeroutput> first.</para>"
    assert normalize_xml(xml) == (
        f"<para>Call {INLINE_CODE_MARKER}<computeroutput>Foo()</computeroutput>"
        " first.</para>"
    )


def test_replaces_space_tags_and_carriage_returns() -> None:
    """Verify <sp/> becomes a non-breaking space entity and CR becomes LF."""
    assert normalize_xml("a<sp/>b<sp />c\r") == "a&amp;nbsp;b&amp;nbsp;c\n"


def test_marks_code_elements_with_attributes() -> None:
    """Verify code elements carrying attributes are marked too."""
    xml = (
        '<para>Example:\n<programlisting filename=".cs"></programlisting>'
        '<computeroutput class="x">y</computeroutput></para>'
    )
    assert normalize_xml(xml) == (
        f'<para>Example:{BLOCK_CODE_MARKER}<programlisting filename=".cs">'
        f'</programlisting>{INLINE_CODE_MARKER}<computeroutput class="x">y'
        "</computeroutput></para>"
    )


def test_leaves_similar_tags_alone() -> None:
    """Verify tags that only share a prefix with code elements are untouched."""
    xml = "<programlistings/><computeroutputs/>"
    assert normalize_xml(xml) == xml
