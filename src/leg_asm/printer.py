'''
impresión legible del AST ('$0 <- $1 add 2', bloques indentados)
'''

from __future__ import annotations
from typing import Iterable, List

from .ast import (
    Value, Cond, Stmt,
    Bin, Un, ReadHigh, Load, Store, Label, If, While, Loop, Call, Ret, Args,
)
from .isa import spec
from .regs import HIGH_TOKEN

def format_value(v: Value) -> str:
    return str(v)

def format_cond(c: Cond) -> str:
    return f"{format_value(c.lhs)} {spec(c.cmp).mnemonic} {format_value(c.rhs)}"

def _lines(stmt: Stmt, indent: str, depth: int) -> List[str]:
    pad = indent * depth
    if isinstance(stmt, Bin):
        return [f"{pad}{stmt.dest} <- {format_value(stmt.lhs)} {spec(stmt.op).mnemonic} {format_value(stmt.rhs)}"]
    if isinstance(stmt, Un):
        return [f"{pad}{stmt.dest} <- {spec(stmt.op).mnemonic} {format_value(stmt.val)}"]
    if isinstance(stmt, ReadHigh):
        return [f"{pad}{stmt.dest} <- {HIGH_TOKEN}"]
    if isinstance(stmt, Load):
        return [f"{pad}{stmt.dest} <- [{format_value(stmt.addr)}]"]
    if isinstance(stmt, Store):
        return [f"{pad}[{format_value(stmt.addr)}] <- {format_value(stmt.val)}"]
    if isinstance(stmt, Label):
        return [f"{pad}{stmt.name}:"]
    if isinstance(stmt, Call):
        return [f"{pad}call {stmt.label}"]
    if isinstance(stmt, Ret):
        return [f"{pad}ret"]
    if isinstance(stmt, Args):
        return [f"{pad}args"]
    if isinstance(stmt, If):
        out = [f"{pad}if {format_cond(stmt.cond)} then"]
        out += _block_lines(stmt.yes, indent, depth + 1)
        if stmt.no:
            out.append(f"{pad}else")
            out += _block_lines(stmt.no, indent, depth + 1)
        out.append(f"{pad}done")
        return out
    if isinstance(stmt, While):
        return ([f"{pad}while {format_cond(stmt.cond)} do"]
                + _block_lines(stmt.body, indent, depth + 1)
                + [f"{pad}done"])
    if isinstance(stmt, Loop):
        return [f"{pad}loop"] + _block_lines(stmt.body, indent, depth + 1) + [f"{pad}done"]
    raise TypeError(f"Sentencia desconocida: {stmt!r}")

def _block_lines(stmts: Iterable[Stmt], indent: str, depth: int) -> List[str]:
    out: List[str] = []
    for s in stmts:
        out += _lines(s, indent, depth)
    return out

def format_stmt(stmt: Stmt, *, indent: str = "  ") -> str:
    """Representación de una sentencia (varias líneas si es un bloque)."""
    return "\n".join(_lines(stmt, indent, 0))

def format_program(program: Iterable[Stmt], *, indent: str = "  ") -> str:
    return "\n".join(_block_lines(program, indent, 0))
