import pytest

from comment_reflow.exceptions import ContractError
from comment_reflow.models import REGIONS, CommentKind, LineRole
from comment_reflow.parser import parse_line

LINE = CommentKind.LINE
BLOCK = CommentKind.BLOCK


@pytest.mark.parametrize(
    "text,kind,role",
    [
        ("// hello world", LINE, LineRole.ONLY),
        ("    //   indented   ", LINE, LineRole.ONLY),
        ("//", LINE, LineRole.ONLY),
        ("/* one liner */", BLOCK, LineRole.ONLY),
        ("/**/", BLOCK, LineRole.ONLY),
        ("  /** doc", BLOCK, LineRole.FIRST),
        ("/**", BLOCK, LineRole.FIRST),
        ("   * middle line  ", BLOCK, LineRole.MIDDLE),
        ("   *", BLOCK, LineRole.MIDDLE),
        ("      plain indented", BLOCK, LineRole.MIDDLE),
        ("", BLOCK, LineRole.MIDDLE),
        ("   * last line */", BLOCK, LineRole.LAST),
        ("   */", BLOCK, LineRole.LAST),
    ],
)
def test_regions_reconstruct_the_line(text, kind, role):
    line = parse_line(text, kind, role)
    assert "".join(getattr(line, region) for region in REGIONS) == text
    assert line.text == text
    assert line.content == line.content.rstrip()


def test_line_comment_regions():
    line = parse_line("  // some text   ", LINE, LineRole.ONLY, index=7)
    assert line.index == 7
    assert line.lead_whitespace == "  "
    assert line.open == "//"
    assert line.prefix == " "
    assert line.content == "some text"
    assert line.suffix == "   "
    assert line.close == ""


def test_doc_block_first_line_keeps_extra_asterisk_in_prefix():
    line = parse_line("/** Summary", BLOCK, LineRole.FIRST)
    assert line.open == "/*"
    assert line.prefix == "* "
    assert line.content == "Summary"
    assert line.close == ""


def test_one_line_block_suffix_sits_before_close():
    line = parse_line("/* text   */", BLOCK, LineRole.ONLY)
    assert line.prefix == " "
    assert line.content == "text"
    assert line.suffix == "   "
    assert line.close == "*/"


def test_continuation_line_with_asterisk():
    line = parse_line("   *   indented", BLOCK, LineRole.MIDDLE)
    assert line.lead_whitespace == "   "
    assert line.prefix == "*   "
    assert line.content == "indented"


def test_continuation_line_without_asterisk_is_all_lead_whitespace():
    line = parse_line("    text here", BLOCK, LineRole.MIDDLE)
    assert line.lead_whitespace == "    "
    assert line.prefix == ""
    assert line.content == "text here"


def test_empty_doc_line_is_a_paragraph_break():
    line = parse_line(" *", BLOCK, LineRole.MIDDLE)
    assert line.prefix == "*"
    assert line.content == ""


def test_bold_markdown_is_not_a_prefix():
    line = parse_line(" **bold** text", BLOCK, LineRole.MIDDLE)
    assert line.prefix == ""
    assert line.content == "**bold** text"


def test_last_line_without_content():
    line = parse_line("   */", BLOCK, LineRole.LAST)
    assert line.lead_whitespace == "   "
    assert line.content == ""
    assert line.close == "*/"


@pytest.mark.parametrize(
    "text,kind,role",
    [
        ("no marker", LINE, LineRole.ONLY),
        ("// text", LINE, LineRole.FIRST),
        ("* text */", BLOCK, LineRole.ONLY),
        ("/* text", BLOCK, LineRole.LAST),
        ("/*/", BLOCK, LineRole.ONLY),
        ("#!/usr/bin/env node", CommentKind.SHEBANG, LineRole.ONLY),
    ],
)
def test_inconsistent_role_fails_fast(text, kind, role):
    with pytest.raises(ContractError):
        parse_line(text, kind, role)
