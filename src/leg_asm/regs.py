'''
registros LEG ($0..$5, $pc, $in, $out), validaciones y números de registro
'''

from __future__ import annotations
from enum import Enum
from typing import Dict

class Reg(Enum):
    """Registro de la máquina; el valor es el token fuente."""
    R0 = "$0"
    R1 = "$1"
    R2 = "$2"
    R3 = "$3"
    R4 = "$4"
    R5 = "$5"
    PC = "$pc"
    IN = "$in"
    OUT = "$out"

    def __str__(self) -> str:
        return self.value

# Pseudo-registro de sólo lectura: sólo válido en 'r = $high'
HIGH_TOKEN = "$high"

# Número de registro en la codificación ($in y $out comparten el 7)
REG_NUM: Dict[Reg, int] = {
    Reg.R0: 0, Reg.R1: 1, Reg.R2: 2, Reg.R3: 3, Reg.R4: 4, Reg.R5: 5,
    Reg.PC: 6, Reg.IN: 7, Reg.OUT: 7,
}

def is_reg(token: str) -> bool:
    """Indica si el token representa un registro válido."""
    try:
        normalize_reg(token)
        return True
    except ValueError:
        return False

def normalize_reg(token: str) -> Reg:
    """Devuelve el registro del token o lanza ValueError (distingue mayúsculas)."""
    try:
        return Reg(token.strip())
    except ValueError:
        raise ValueError(f"Registro inválido: {token}") from None

def reg_num(reg: Reg) -> int:
    return REG_NUM[reg]
