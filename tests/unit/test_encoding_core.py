from src.leg_asm.parser import parse
from src.leg_asm.encoding import encode

def _enc(src: str):
    return encode(parse(src), filename="<mem>")

def test_alu_and_immediate_flags():
    enc = _enc("""
      $0 = $1 + $2
      $0 = 3 - $2
      $0 = $1 & 4
      $out = 5 ^ 6
      $2 = $in
    """)
    assert not enc.diagnostics
    assert [w.text for w in enc.words] == [
        "0 1 2 0",
        "129 3 2 0",     # sub + 128 (izquierdo inmediato)
        "66 1 4 0",      # and + 64 (derecho inmediato)
        "197 5 6 7",     # xor + 128 + 64
        "64 7 0 2",      # 'r = v' es 'r = v + 0'
    ]

def test_not_load_save_label():
    enc = _enc("$1 = ! $pc $1 = ! 9 $3 = [ $4 ] [ 10 ] = $5 top:")
    assert not enc.diagnostics
    assert [w.text for w in enc.words] == [
        "4 6 0 1",
        "132 9 0 1",
        "6 4 0 3",
        "7 10 5 0",
        "label top",
    ]
    assert [w.mnemonic for w in enc.words] == ["not", "not", "load", "save", "label"]

def test_unencodable_statements_report_errors():
    enc = _enc("""
      $0 = $1 * 2
      $0 = $high
      loop done
      call f
      $0 = 1
    """)
    assert [w.text for w in enc.words] == ["64 1 0 0"]
    assert len(enc.diagnostics) == 4
    assert all(d.severity == "error" for d in enc.diagnostics)
    assert "mul" in enc.diagnostics[0].message
    assert enc.diagnostics[0].line == 2
    assert enc.diagnostics[0].file == "<mem>"
