from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import make_nesting_error, make_unmatched_close_error, make_unterminated_loop_error
from .lexer import Token, tokenize
from .nodes import Decr, Incr, Input, Loop, Node, Output, ShiftLeft, ShiftRight

logger = logging.getLogger(__name__)

Cursor = Iterator[Tuple[int, Token]]

_LEAVES: Dict[Token, Node] = {
    Token.SHIFT_RIGHT: ShiftRight(),
    Token.SHIFT_LEFT: ShiftLeft(),
    Token.INCREMENT: Incr(),
    Token.DECREMENT: Decr(),
    Token.OUTPUT: Output(),
    Token.INPUT: Input(),
}


def _build_block(cursor: Cursor, source: str, opened_at: Optional[int]) -> List[Node]:
    # ``cursor`` is shared with every enclosing call: whatever a nested loop
    # consumes is gone for its parent as well.
    block: List[Node] = []
    for offset, token in cursor:
        if token is Token.LOOP_OPEN:
            try:
                body = _build_block(cursor, source, offset)
            except RecursionError:
                # Raised again by frames too close to the limit to build the
                # error; the first one with room reports it.
                raise make_nesting_error(source=source, offset=offset) from None
            block.append(Loop(tuple(body)))
        elif token is Token.LOOP_CLOSE:
            if opened_at is None:
                raise make_unmatched_close_error(source=source, offset=offset)
            return block
        elif token is Token.COMMENT:
            continue
        else:
            block.append(_LEAVES[token])

    if opened_at is not None:
        raise make_unterminated_loop_error(source=source, offset=opened_at)
    return block


def build_tree(tokens: Sequence[Token], source: str = "") -> List[Node]:
    """Build the instruction tree for a token sequence.

    ``source`` is only used to render error context; pass the text the tokens
    came from to get line/column information in parse errors.
    """
    if not source:
        source = "".join(t.value or ' ' for t in tokens)
    return _build_block(iter(enumerate(tokens)), source, None)


def parse(source: str) -> List[Node]:
    tree = build_tree(tokenize(source), source)
    logger.debug("parsed %d characters into %d top-level nodes", len(source), len(tree))
    return tree
