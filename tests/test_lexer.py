import pytest

from comment_reflow.exceptions import ScanError
from comment_reflow.lexer import scan_comments
from comment_reflow.models import CommentKind
from comment_reflow.source import SourceText

SAMPLE = (
    "#!/usr/bin/env node\n"
    "// a\n"
    "const x = 1; // trailing\n"
    "/* block */ foo();\n"
    "/**\n"
    " * doc\n"
    " */\n"
)


def scan(text):
    return scan_comments(SourceText(text))


def test_comment_kinds_and_positions():
    spans = scan(SAMPLE)
    assert [(s.kind, s.start_line, s.end_line) for s in spans] == [
        (CommentKind.SHEBANG, 1, 1),
        (CommentKind.LINE, 2, 2),
        (CommentKind.LINE, 3, 3),
        (CommentKind.BLOCK, 4, 4),
        (CommentKind.BLOCK, 5, 7),
    ]


def test_comments_sharing_a_line_with_code():
    spans = scan(SAMPLE)
    assert [s.shares_line for s in spans] == [False, False, True, True, False]


def test_span_columns_and_lines():
    spans = scan(SAMPLE)
    line = spans[1]
    assert (line.start_column, line.end_column) == (0, 4)
    assert line.lines == ("// a",)

    doc = spans[4]
    assert (doc.start_column, doc.end_column) == (0, 3)
    assert doc.lines == ("/**", " * doc", " */")


@pytest.mark.parametrize(
    "text",
    [
        "const s = '// not a comment';\n",
        'const s = "/* not a comment */";\n',
        "const s = `\n/* still a template\n*/`;\n",
        "const s = 'it\\'s // fine';\n",
        "const ratio = a / b;\n",
    ],
)
def test_comment_markers_inside_literals_are_ignored(text):
    assert scan(text) == []


def test_division_before_comment():
    spans = scan("a = b / c; // note\n")
    assert len(spans) == 1
    assert spans[0].kind is CommentKind.LINE
    assert spans[0].shares_line


def test_code_after_block_comment_on_its_last_line():
    spans = scan("/*\n * text\n */ run();\n")
    assert spans[0].shares_line


def test_unterminated_block_comment():
    with pytest.raises(ScanError):
        scan("/* never closed\n")


def test_crlf_line_comment_ends_before_terminator():
    spans = scan("// a\r\n// b\r\n")
    assert [(s.start_line, s.end_column) for s in spans] == [(1, 4), (2, 4)]
