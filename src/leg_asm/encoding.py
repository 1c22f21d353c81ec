# src/leg_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .ast import Imm, Value, Stmt, Bin, Un, Load, Store, Label, If, While, Loop
from .isa import spec, OP_LOAD, OP_SAVE, IMM_LHS_FLAG, IMM_RHS_FLAG
from .regs import Reg, reg_num
from .utils import u8
from .diagnostics import Diagnostic, error

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    text: str     # 'op a b c' o 'label nombre'
    line: int
    col: int
    mnemonic: str

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

# ---------------- Helpers ----------------

def _num(v: Value) -> int:
    if isinstance(v, Reg):
        return reg_num(v)
    return v.value

def _flags(lhs: Value, rhs: Optional[Value] = None) -> int:
    f = IMM_LHS_FLAG if isinstance(lhs, Imm) else 0
    if isinstance(rhs, Imm):
        f |= IMM_RHS_FLAG
    return f

def _fields(*xs: int) -> str:
    return " ".join(str(x) for x in xs)

# ---------------- Codificación ----------------

def encode(program: Iterable[Stmt], *, filename: Optional[str] = None) -> EncodeResult:
    """Codifica las sentencias planas a líneas de cuatro campos.

    Sólo add/sub/and/or/xor, not, carga, guardado y etiquetas tienen codificación;
    el resto genera un diagnóstico de error y ninguna palabra.
    """
    words: List[Encoded] = []
    diags: List[Diagnostic] = []

    for n in program:
        text: Optional[str] = None
        mnem = type(n).__name__.lower()

        if isinstance(n, Bin):
            sp = spec(n.op)
            mnem = sp.mnemonic
            if sp.opcode is None:
                diags.append(error(f"Operación sin codificación: {sp.mnemonic}",
                                   line=n.line, col=n.col, file=filename))
            else:
                text = _fields(u8(sp.opcode + _flags(n.lhs, n.rhs)), _num(n.lhs), _num(n.rhs), reg_num(n.dest))

        elif isinstance(n, Un):
            sp = spec(n.op)
            mnem = sp.mnemonic
            text = _fields(u8(sp.opcode + _flags(n.val)), _num(n.val), 0, reg_num(n.dest))

        elif isinstance(n, Load):
            text = _fields(OP_LOAD, _num(n.addr), 0, reg_num(n.dest))

        elif isinstance(n, Store):
            mnem = "save"
            text = _fields(OP_SAVE, _num(n.addr), _num(n.val), 0)

        elif isinstance(n, Label):
            text = f"label {n.name}"

        elif isinstance(n, (If, While, Loop)):
            diags.append(error(f"Bloque '{mnem}' sin codificación: debe bajarse a saltos antes de codificar",
                               line=n.line, col=n.col, file=filename))

        else:
            diags.append(error(f"Sentencia sin codificación: {mnem}",
                               line=n.line, col=n.col, file=filename))

        if text is not None:
            words.append(Encoded(text=text, line=n.line, col=n.col, mnemonic=mnem))

    return EncodeResult(words=words, diagnostics=diags)
