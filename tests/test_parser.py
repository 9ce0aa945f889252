import pytest

from bfi.errors import BFIParseError, LoopNestingTooDeep, UnmatchedLoopClose, UnterminatedLoop
from bfi.lexer import tokenize
from bfi.nodes import Decr, Incr, Input, Loop, Output, ShiftLeft, ShiftRight, count_ops, emit
from bfi.parser import build_tree, parse


def test_empty_source_gives_empty_tree():
    assert parse("") == []


def test_leaves_in_order():
    assert parse("+-<>.,") == [Incr(), Decr(), ShiftLeft(), ShiftRight(), Output(), Input()]


def test_comments_are_skipped():
    assert parse("hello + world\n-") == [Incr(), Decr()]


def test_loop_body():
    assert parse("+[-.]") == [Incr(), Loop((Decr(), Output()))]


def test_nested_loops_share_one_cursor():
    """Tokens consumed by an inner loop must not be seen again by the outer one."""
    tree = parse("++[>+++[<.>-]<-]")
    assert tree == [
        Incr(),
        Incr(),
        Loop((
            ShiftRight(),
            Incr(), Incr(), Incr(),
            Loop((ShiftLeft(), Output(), ShiftRight(), Decr())),
            ShiftLeft(),
            Decr(),
        )),
    ]


def test_sibling_loops():
    assert parse("[][+]") == [Loop(()), Loop((Incr(),))]


def test_deep_nesting():
    assert parse("[[[]]]") == [Loop((Loop((Loop(()),)),))]


def test_parse_is_idempotent():
    source = "++++[>++[>+<-]<-]>>.,[.,]"
    assert parse(source) == parse(source)


def test_build_tree_from_tokens():
    assert build_tree(tokenize("+[-]")) == [Incr(), Loop((Decr(),))]


@pytest.mark.parametrize("source", ["]", "+]", "[]]", "[+]]-"])
def test_unmatched_close(source):
    with pytest.raises(UnmatchedLoopClose):
        parse(source)


@pytest.mark.parametrize("source", ["[", "+[", "[[]", "[+[-]"])
def test_unterminated_loop(source):
    with pytest.raises(UnterminatedLoop):
        parse(source)


def test_parse_errors_share_a_base_class():
    with pytest.raises(BFIParseError):
        parse("[")
    with pytest.raises(BFIParseError):
        parse("]")


def test_unterminated_loop_points_at_the_open_bracket():
    with pytest.raises(UnterminatedLoop) as info:
        parse("+\n+[-]\n  [+")
    err = info.value
    assert err.offset == 9
    assert (err.line, err.column) == (3, 3)
    assert "line 3, column 3" in str(err)
    assert "Hint:" in str(err)


def test_unmatched_close_location_and_context():
    with pytest.raises(UnmatchedLoopClose) as info:
        parse("+++\n--]")
    err = info.value
    assert (err.line, err.column) == (2, 3)
    assert ">    2 | --]" in err.context
    assert err.context.splitlines()[-1].endswith("  ^")


def test_emit_drops_comments():
    tree = parse("a+b[c-d]e.")
    assert emit(tree) == "+[-]."
    assert parse(emit(tree)) == tree


def test_count_ops():
    assert count_ops(parse("")) == 0
    assert count_ops(parse("+[-.]x")) == 5


def test_moderate_nesting_parses():
    tree = parse("[" * 200 + "]" * 200)
    depth = 0
    node = tree[0]
    while node.body:
        node = node.body[0]
        depth += 1
    assert depth == 199


def test_nesting_past_the_recursion_limit_is_a_parse_error():
    source = "+" + "[" * 3000 + "]" * 3000
    with pytest.raises(LoopNestingTooDeep) as info:
        parse(source)
    err = info.value
    assert isinstance(err, BFIParseError)
    assert source[err.offset] == "["
    assert "loop nesting too deep" in str(err)
