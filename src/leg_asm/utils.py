'''
bit-twiddling de 8 bits (u8, rangos sin signo)
'''

from __future__ import annotations

# Máscara para 8 bits sin signo
U8_MASK = 0xFF

def u8(x: int) -> int:
    """Fuerza el valor al rango de 8 bits sin signo."""
    return x & U8_MASK

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)
