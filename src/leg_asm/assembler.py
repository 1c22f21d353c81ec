from __future__ import annotations
import argparse, sys
from typing import List, Optional, Tuple

from .ast import Program
from .parser import parse
from .encoding import encode, EncodeResult
from .printer import format_program
from .writers import to_text_lines, write_lines
from .diagnostics import AsmError, Diagnostic

def parse_text(text: str, *, filename: str | None = None) -> Tuple[Program, List[Diagnostic]]:
    """Parsea sin lanzar: devuelve (programa, []) o ((), [diagnóstico])."""
    try:
        return parse(text, filename=filename), []
    except AsmError as ex:
        return (), [ex.diagnostic]

def assemble_text(text: str, *, filename: str | None = None) -> Tuple[Program, List[Diagnostic], Optional[EncodeResult]]:
    """Parsea y codifica.
    Devuelve (programa, diagnostics_totales, enc_result); enc_result es None si falló el parseo."""
    program, diags = parse_text(text, filename=filename)
    if diags:
        return program, diags, None
    enc = encode(program, filename=filename)
    return program, list(enc.diagnostics), enc

def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="LEG assembler front-end")
    ap.add_argument("source", nargs="?", default="-", help="archivo fuente ('-' o nada para stdin)")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto stdout)")
    ap.add_argument("--ast", action="store_true", help="imprime el AST en vez del código")
    args = ap.parse_args(argv)

    filename = "<stdin>" if args.source == "-" else args.source
    try:
        text = _read_source(args.source)
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    if args.ast:
        program, diags = parse_text(text, filename=filename)
    else:
        program, diags, enc = assemble_text(text, filename=filename)

    had_error = False
    for d in diags:
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.severity == "error":
            had_error = True

    if had_error:
        return 1

    if args.ast:
        lines = format_program(program).splitlines()
    else:
        lines = to_text_lines(enc.words)

    if args.output is None:
        for line in lines:
            print(line)
        return 0

    try:
        write_lines(lines, args.output)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    print(f"OK: {len(lines)} líneas → {args.output}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
