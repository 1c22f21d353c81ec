'''
tabla formal de operadores LEG (binarios, unarios, comparaciones, opcodes)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

class BinOp(Enum):
    """Operadores binarios; el valor es el símbolo fuente."""
    ADD = "+"
    SUB = "-"
    AND = "&"
    OR = "|"
    XOR = "^"
    SHL = "<<"
    SHR = ">>"
    ROTL = "<|"
    ROTR = "|>"
    SAR = "!>>"
    MUL = "*"
    DIV = "/"

class UnOp(Enum):
    NOT = "!"

class Cmp(Enum):
    EQ = "=="
    NEQ = "!="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="

Op = Union[BinOp, UnOp, Cmp]

@dataclass(frozen=True)
class OpSpec:
    """Especificación de un operador.

    - mnemonic: nombre legible usado al imprimir
    - opcode: código numérico si la máquina lo codifica directamente (None si no)
    """
    mnemonic: str
    opcode: Optional[int] = None

# Códigos de las instrucciones de memoria
OP_LOAD = 6
OP_SAVE = 7

# Bits de inmediato en el primer campo de la codificación
IMM_LHS_FLAG = 128
IMM_RHS_FLAG = 64

SPEC: Dict[Op, OpSpec] = {}

def _add(op: Op, mnemonic: str, opcode: Optional[int] = None):
    SPEC[op] = OpSpec(mnemonic, opcode)

# ALU
_add(BinOp.ADD, "add", 0)
_add(BinOp.SUB, "sub", 1)
_add(BinOp.AND, "and", 2)
_add(BinOp.OR,  "or",  3)
_add(UnOp.NOT,  "not", 4)
_add(BinOp.XOR, "xor", 5)

# Sin codificación directa en la máquina
_add(BinOp.SHL,  "shl")
_add(BinOp.SHR,  "shr")
_add(BinOp.ROTL, "rotl")
_add(BinOp.ROTR, "rotr")
_add(BinOp.SAR,  "sar")
_add(BinOp.MUL,  "mul")
_add(BinOp.DIV,  "div")

# Comparaciones (saltos condicionales)
_add(Cmp.EQ,  "eq",  16)
_add(Cmp.NEQ, "neq", 17)
_add(Cmp.LT,  "lt",  18)
_add(Cmp.LEQ, "leq", 19)
_add(Cmp.GT,  "gt",  20)
_add(Cmp.GEQ, "geq", 21)

# Búsqueda por símbolo fuente (lexer/parser)
BINOPS: Dict[str, BinOp] = {op.value: op for op in BinOp}
UNOPS: Dict[str, UnOp] = {op.value: op for op in UnOp}
CMPS: Dict[str, Cmp] = {op.value: op for op in Cmp}

def spec(op: Op) -> OpSpec:
    """Devuelve la especificación de un operador."""
    if op not in SPEC:
        raise KeyError(f"Operador desconocido: {op}")
    return SPEC[op]
