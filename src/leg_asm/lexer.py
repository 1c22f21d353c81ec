from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional

from .regs import HIGH_TOKEN, is_reg
from .isa import BINOPS, UNOPS, CMPS
from .diagnostics import error, LexicalError

KEYWORDS = frozenset({
    "if", "then", "else", "done", "while", "do", "loop", "call", "ret", "args",
})

# Los operadores largos van primero: '<=' nunca es '<' + '=', '!>>' nunca es '!' + '>>'
OPERATORS = ("!>>", "<<", ">>", "<|", "|>", "==", "!=", "<=", ">=",
             "+", "-", "&", "|", "^", "*", "/", "!", "<", ">",
             "=", ":", "[", "]", "?")

TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<reg>\$[A-Za-z0-9_]*)"
    r"|(?P<word>[A-Za-z0-9_]+)"
    r"|(?P<op>" + "|".join(re.escape(op) for op in OPERATORS) + r")"
)

SYMBOL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
IMM_RE    = re.compile(r"^[0-9]+$")

@dataclass(frozen=True)
class Token:
    """Token con su categoría y posición (línea y columna desde 1).

    kind: 'REG', 'HIGH', 'IMM', 'IDENT', 'KW', 'BINOP', 'UNOP', 'CMP', 'PUNCT' o 'EOF'
    """
    kind: str
    text: str
    line: int
    col: int

    def describe(self) -> str:
        return "fin de entrada" if self.kind == "EOF" else f"'{self.text}'"

def _classify_op(text: str) -> str:
    if text in BINOPS:
        return "BINOP"
    if text in UNOPS:
        return "UNOP"
    if text in CMPS:
        return "CMP"
    return "PUNCT"

def tokenize(text: str, *, filename: Optional[str] = None) -> List[Token]:
    """Divide el texto en tokens (máximo bocado). Siempre termina con un token EOF.

    Lanza LexicalError ante un carácter desconocido, un identificador mal formado
    (p.ej. '9abc') o un registro inexistente (p.ej. '$7').
    """
    out: List[Token] = []
    pos = 0
    line, line_start = 1, 0
    while pos < len(text):
        col = pos - line_start + 1
        m = TOKEN_RE.match(text, pos)
        if not m:
            ch = text[pos]
            raise LexicalError(
                error(f"Carácter inesperado: {ch!r}", line=line, col=col, file=filename),
                token=ch)
        s = m.group()
        kind = m.lastgroup
        if kind == "ws":
            nl = s.count("\n")
            if nl:
                line += nl
                line_start = pos + s.rindex("\n") + 1
        elif kind == "reg":
            if s == HIGH_TOKEN:
                out.append(Token("HIGH", s, line, col))
            elif is_reg(s):
                out.append(Token("REG", s, line, col))
            else:
                raise LexicalError(
                    error(f"Registro inválido: {s}", line=line, col=col, file=filename,
                          hint="registros: $0..$5, $pc, $in, $out"),
                    token=s)
        elif kind == "word":
            if IMM_RE.match(s):
                out.append(Token("IMM", s, line, col))
            elif SYMBOL_RE.match(s):
                out.append(Token("KW" if s in KEYWORDS else "IDENT", s, line, col))
            else:
                raise LexicalError(
                    error(f"Identificador mal formado: {s}", line=line, col=col, file=filename),
                    token=s)
        else:
            out.append(Token(_classify_op(s), s, line, col))
        pos = m.end()
    out.append(Token("EOF", "", line, pos - line_start + 1))
    return out
