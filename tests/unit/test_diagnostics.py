from src.leg_asm.diagnostics import error, AsmError, AsmSyntaxError

def test_error_str():
    d = error("inmediato fuera de rango", line=12, col=8, file="prog.asm", hint="use 0..255")
    s = str(d)
    assert "prog.asm:12:8:" in s
    assert "ERROR: inmediato fuera de rango" in s
    assert "(pista: use 0..255)" in s

def test_exception_carries_diagnostic():
    d = error("Se esperaba 'done'", line=1, col=5)
    ex = AsmSyntaxError(d, token="", expected="'done'")
    assert isinstance(ex, AsmError) and isinstance(ex, ValueError)
    assert ex.diagnostic is d
    assert ex.expected == "'done'"
    assert str(ex) == "1:5: ERROR: Se esperaba 'done'"

def test_only_error_severity_is_emitted():
    assert error("x").severity == "error"
    assert str(error("x")) == "ERROR: x"
