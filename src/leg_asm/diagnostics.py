'''
clase Diagnostic, helpers (línea/columna, tipos de error) y excepciones de parseo
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error"]

_SEV_TO_LABEL = {
    "error": "ERROR",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Errores con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

# ---------- Excepciones ----------

class AsmError(ValueError):
    """Fallo de parseo: lleva el diagnóstico, el token culpable y lo que se esperaba."""

    def __init__(self, diagnostic: Diagnostic, *, token: Optional[str] = None,
                 expected: Optional[str] = None):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic
        self.token = token
        self.expected = expected

class LexicalError(AsmError):
    """Un trozo de la entrada no forma ningún token válido."""

class AsmSyntaxError(AsmError):
    """Secuencia de tokens válida que no encaja en ninguna producción."""

class ImmRangeError(AsmError):
    """Inmediato fuera del rango de 8 bits."""
