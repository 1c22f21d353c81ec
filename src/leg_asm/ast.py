'''
dataclases de AST (valores, condiciones, sentencias y bloques)
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from .regs import Reg
from .isa import BinOp, UnOp, Cmp

# ---- Operandos ----

@dataclass(frozen=True)
class Imm:
    """Inmediato de 8 bits sin signo (0..255)."""
    value: int

    def __str__(self) -> str:
        return str(self.value)

Value = Union[Reg, Imm]

@dataclass(frozen=True)
class Cond:
    """Comparación simple 'lhs cmp rhs' (sin and/or)."""
    lhs: Value
    cmp: Cmp
    rhs: Value

# ---- Sentencias ----
# line/col no participan en la igualdad: dos fuentes con la misma forma dan ASTs iguales.

@dataclass(frozen=True)
class Bin:
    """dest = lhs op rhs  (también 'dest = v', que equivale a 'dest = v + 0')."""
    op: BinOp
    lhs: Value
    rhs: Value
    dest: Reg
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Un:
    """dest = op val"""
    op: UnOp
    val: Value
    dest: Reg
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class ReadHigh:
    """dest = $high"""
    dest: Reg
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Load:
    """dest = [addr]"""
    addr: Value
    dest: Reg
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Store:
    """[addr] = val"""
    addr: Value
    val: Value
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'loop:')."""
    name: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class If:
    """if cond then yes [else no] done; sin 'else' el bloque 'no' queda vacío."""
    cond: Cond
    yes: Tuple['Stmt', ...]
    no: Tuple['Stmt', ...] = ()
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class While:
    cond: Cond
    body: Tuple['Stmt', ...]
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Loop:
    body: Tuple['Stmt', ...]
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Call:
    label: str
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Ret:
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

@dataclass(frozen=True)
class Args:
    """Recoge los argumentos del procedimiento actual."""
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

Stmt = Union[Bin, Un, ReadHigh, Load, Store, Label, If, While, Loop, Call, Ret, Args]
Program = Tuple[Stmt, ...]
