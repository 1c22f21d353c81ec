import pytest
from src.leg_asm.lexer import tokenize
from src.leg_asm.diagnostics import LexicalError

def _kt(src):
    return [(t.kind, t.text) for t in tokenize(src)[:-1]]

# --- máximo bocado ---
@pytest.mark.parametrize("src, expected", [
    ("!>>", [("BINOP", "!>>")]),
    ("! >>", [("UNOP", "!"), ("BINOP", ">>")]),
    ("<=", [("CMP", "<=")]),
    ("< =", [("CMP", "<"), ("PUNCT", "=")]),
    ("<<", [("BINOP", "<<")]),
    ("<|", [("BINOP", "<|")]),
    ("|>", [("BINOP", "|>")]),
    ("|", [("BINOP", "|")]),
    ("==", [("CMP", "==")]),
    ("!=", [("CMP", "!=")]),
    (">=", [("CMP", ">=")]),
    ("?", [("PUNCT", "?")]),
])
def test_operators(src, expected):
    assert _kt(src) == expected

def test_statement_tokens():
    assert _kt("$0 = $1 + 2") == [
        ("REG", "$0"), ("PUNCT", "="), ("REG", "$1"), ("BINOP", "+"), ("IMM", "2"),
    ]
    # sin espacios también
    assert _kt("$0=$1!>>$2") == [
        ("REG", "$0"), ("PUNCT", "="), ("REG", "$1"), ("BINOP", "!>>"), ("REG", "$2"),
    ]

def test_keywords_labels_and_high():
    assert _kt("loop: call loop_2 $3 = $high while") == [
        ("KW", "loop"), ("PUNCT", ":"), ("KW", "call"), ("IDENT", "loop_2"),
        ("REG", "$3"), ("PUNCT", "="), ("HIGH", "$high"), ("KW", "while"),
    ]

def test_positions_and_eof():
    toks = tokenize("$0 = 1\n  ret\n")
    ret = toks[3]
    assert (ret.text, ret.line, ret.col) == ("ret", 2, 3)
    assert toks[-1].kind == "EOF"
    assert tokenize("")[0].kind == "EOF"

@pytest.mark.parametrize("src, bad", [
    ("$0 = 1 # comentario", "#"),
    ("9abc:", "9abc"),
    ("$0 = $7", "$7"),
    ("$ = 1", "$"),
    ("$0 = 1,", ","),
])
def test_lexical_errors(src, bad):
    with pytest.raises(LexicalError) as ei:
        tokenize(src, filename="x.leg")
    assert ei.value.token == bad
    assert ei.value.diagnostic.file == "x.leg"
