# src/leg_asm/parser.py
from __future__ import annotations
from typing import FrozenSet, List, NoReturn, Optional, Tuple

from .lexer import Token, tokenize
from .ast import (
    Imm, Value, Cond, Stmt, Program,
    Bin, Un, ReadHigh, Load, Store, Label, If, While, Loop, Call, Ret, Args,
)
from .isa import BinOp, BINOPS, UNOPS, CMPS
from .regs import normalize_reg
from .utils import is_unsigned_nbit
from .diagnostics import error, AsmSyntaxError, ImmRangeError

IMM_BITS = 8

_DONE: FrozenSet[str] = frozenset({"done"})
_THEN_BLOCK_END: FrozenSet[str] = frozenset({"else", "done"})

def _parse_imm(tok: Token, *, filename: Optional[str] = None) -> Imm:
    # sin ceros a la izquierda, más de 3 dígitos no cabe en 8 bits
    digits = tok.text.lstrip("0") or "0"
    if len(digits) > 3 or not is_unsigned_nbit(int(digits, 10), IMM_BITS):
        raise ImmRangeError(
            error(f"Inmediato fuera de rango: {tok.text}", line=tok.line, col=tok.col,
                  file=filename, hint="use 0..255 (8 bits sin signo)"),
            token=tok.text, expected="inmediato de 8 bits")
    return Imm(int(digits, 10))

class _Parser:
    """Descenso recursivo con un token de anticipación y sin retroceso."""

    def __init__(self, tokens: List[Token], filename: Optional[str]):
        self.toks = tokens
        self.pos = 0
        self.filename = filename

    # ---------- Cursor ----------

    def peek(self) -> Token:
        return self.toks[self.pos]

    def advance(self) -> Token:
        tok = self.toks[self.pos]
        if tok.kind != "EOF":
            self.pos += 1
        return tok

    def at(self, kind: str, text: Optional[str] = None) -> bool:
        tok = self.peek()
        return tok.kind == kind and (text is None or tok.text == text)

    def fail(self, tok: Token, expected: str, message: Optional[str] = None) -> NoReturn:
        msg = message or f"Se esperaba {expected}, se encontró {tok.describe()}"
        raise AsmSyntaxError(
            error(msg, line=tok.line, col=tok.col, file=self.filename),
            token=tok.text, expected=expected)

    def expect(self, kind: str, text: Optional[str] = None, *, what: str) -> Token:
        if not self.at(kind, text):
            self.fail(self.peek(), what)
        return self.advance()

    # ---------- Producciones ----------

    def program(self) -> Program:
        stmts = []
        while not self.at("EOF"):
            stmts.append(self.stmt())
        return tuple(stmts)

    def block(self, terminators: FrozenSet[str]) -> Tuple[Stmt, ...]:
        """Sentencias hasta ver una palabra clave de 'terminators' (que no se consume)."""
        stmts = []
        while not (self.at("KW") and self.peek().text in terminators):
            if self.at("EOF"):
                self.fail(self.peek(), " o ".join(f"'{t}'" for t in sorted(terminators)))
            stmts.append(self.stmt())
        return tuple(stmts)

    def stmt(self) -> Stmt:
        tok = self.peek()
        if tok.kind == "REG":
            return self.assign()
        if tok.kind == "PUNCT" and tok.text == "[":
            return self.store()
        if tok.kind == "IDENT":
            self.advance()
            self.expect("PUNCT", ":", what="':' tras la etiqueta")
            return Label(tok.text, line=tok.line, col=tok.col)
        if tok.kind == "KW":
            kw = tok.text
            if kw == "if":
                return self.if_stmt()
            if kw == "while":
                return self.while_stmt()
            if kw == "loop":
                self.advance()
                body = self.block(_DONE)
                self.advance()
                return Loop(body, line=tok.line, col=tok.col)
            if kw == "call":
                self.advance()
                target = self.expect("IDENT", what="una etiqueta tras 'call'")
                return Call(target.text, line=tok.line, col=tok.col)
            if kw == "ret":
                self.advance()
                return Ret(line=tok.line, col=tok.col)
            if kw == "args":
                self.advance()
                return Args(line=tok.line, col=tok.col)
            # then/else/do/done fuera de su bloque
            self.fail(tok, "una sentencia", f"'{kw}' sin bloque abierto que le corresponda")
        self.fail(tok, "una sentencia")

    def assign(self) -> Stmt:
        """REG '=' ( '$high' | '[' v ']' | UNOP v | v [BINOP v] )"""
        dtok = self.advance()
        dest = normalize_reg(dtok.text)
        self.expect("PUNCT", "=", what="'=' tras el registro destino")
        loc = dict(line=dtok.line, col=dtok.col)
        if self.at("HIGH"):
            self.advance()
            return ReadHigh(dest, **loc)
        if self.at("PUNCT", "["):
            return Load(self.address(), dest, **loc)
        if self.at("UNOP"):
            op = UNOPS[self.advance().text]
            return Un(op, self.value(), dest, **loc)
        lhs = self.value()
        if self.at("BINOP"):
            op = BINOPS[self.advance().text]
            return Bin(op, lhs, self.value(), dest, **loc)
        # 'r = v' equivale a 'r = v + 0'
        return Bin(BinOp.ADD, lhs, Imm(0), dest, **loc)

    def store(self) -> Store:
        tok = self.peek()
        addr = self.address()
        self.expect("PUNCT", "=", what="'=' tras la dirección de memoria")
        return Store(addr, self.value(), line=tok.line, col=tok.col)

    def address(self) -> Value:
        self.expect("PUNCT", "[", what="'['")
        addr = self.value()
        self.expect("PUNCT", "]", what="']' tras la dirección")
        return addr

    def if_stmt(self) -> If:
        tok = self.advance()
        cond = self.cond()
        self.expect("KW", "then", what="'then' tras la condición")
        yes = self.block(_THEN_BLOCK_END)
        no: Tuple[Stmt, ...] = ()
        if self.at("KW", "else"):
            self.advance()
            no = self.block(_DONE)
        self.advance()
        return If(cond, yes, no, line=tok.line, col=tok.col)

    def while_stmt(self) -> While:
        tok = self.advance()
        cond = self.cond()
        self.expect("KW", "do", what="'do' tras la condición")
        body = self.block(_DONE)
        self.advance()
        return While(cond, body, line=tok.line, col=tok.col)

    def cond(self) -> Cond:
        lhs = self.value()
        tok = self.expect("CMP", what="un operador de comparación (== != < <= > >=)")
        return Cond(lhs, CMPS[tok.text], self.value())

    def value(self) -> Value:
        tok = self.peek()
        if tok.kind == "REG":
            self.advance()
            return normalize_reg(tok.text)
        if tok.kind == "IMM":
            self.advance()
            return _parse_imm(tok, filename=self.filename)
        if tok.kind == "HIGH":
            self.fail(tok, "un registro o inmediato", "'$high' sólo puede leerse con 'r = $high'")
        self.fail(tok, "un registro o inmediato")

def parse(text: str, *, filename: Optional[str] = None) -> Program:
    """
    Devuelve el programa como tupla de sentencias (los bloques anidan tuplas).

    Reglas:
      - 'r = $high', 'r = [a]' y 'r = op v' se reconocen antes que las asignaciones aritméticas.
      - 'r = v1 op v2' tiene prioridad; sin operador, 'r = v' equivale a 'r = v + 0'.
      - '[a] = v' guarda en memoria; 'nombre:' declara una etiqueta.
      - if/then[/else]/done, while/do/done y loop/done contienen sentencias anidadas.
      - Inmediatos decimales de 0 a 255.

    Lanza LexicalError, AsmSyntaxError o ImmRangeError (todas AsmError); nunca devuelve
    un AST parcial.
    """
    p = _Parser(tokenize(text, filename=filename), filename)
    try:
        return p.program()
    except RecursionError:
        tok = p.peek()
        raise AsmSyntaxError(
            error("Anidamiento demasiado profundo", line=tok.line, col=tok.col, file=filename,
                  hint="reduzca la profundidad de los bloques if/while/loop"),
            token=tok.text, expected="menos bloques anidados") from None
