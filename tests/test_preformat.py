from comment_reflow.models import Unit, CommentKind
from comment_reflow.preformat import PreformatFlag
from comment_reflow.scanner import parse_unit


def verbatim_flags(texts):
    unit = Unit(kind=CommentKind.BLOCK, start_line=1, end_line=len(texts), end_column=0, texts=texts)
    flag = PreformatFlag()
    return [flag.advance(line) for line in parse_unit(unit)]


def test_fenced_code_is_verbatim_including_fences():
    flags = verbatim_flags([
        "/**",
        " * Intro",
        " * ```",
        " * const x = 1;",
        " * ```",
        " * Outro",
        " */",
    ])
    assert flags == [False, False, True, True, True, False, False]


def test_example_section_ends_at_next_tag():
    flags = verbatim_flags([
        "/**",
        " * Summary",
        " * @example",
        " * run(1, 2)",
        " * @example",
        " * run(3)",
        " * @returns nothing",
        " */",
    ])
    assert flags == [False, False, True, True, True, True, False, False]


def test_fence_on_first_line_does_not_start_a_region():
    flags = verbatim_flags(["/*```", " text", " */"])
    assert flags == [False, False, False]


def test_line_comments_are_never_verbatim():
    unit = Unit(kind=CommentKind.LINE, start_line=1, end_line=2, end_column=5, texts=["// ```", "// x"])
    flag = PreformatFlag()
    assert [flag.advance(line) for line in parse_unit(unit)] == [False, False]
    assert not flag.active


def test_reset_clears_state():
    flag = PreformatFlag(in_fence=True, in_example=True)
    flag.reset()
    assert not flag.active
