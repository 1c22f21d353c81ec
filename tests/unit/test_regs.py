import pytest
from src.leg_asm.regs import Reg, normalize_reg, reg_num, is_reg

TOKENS = ["$0", "$1", "$2", "$3", "$4", "$5", "$pc", "$in", "$out"]

def test_register_bijection():
    regs = [normalize_reg(t) for t in TOKENS]
    assert len(set(regs)) == 9
    assert set(regs) == set(Reg)
    assert [str(r) for r in regs] == TOKENS

def test_special_names():
    assert normalize_reg("$pc") is Reg.PC
    assert normalize_reg("$in") is Reg.IN
    assert normalize_reg("$out") is Reg.OUT
    assert reg_num(Reg.R5) == 5
    assert reg_num(Reg.PC) == 6
    assert reg_num(Reg.IN) == reg_num(Reg.OUT) == 7
    assert is_reg("$3")

def test_invalid():
    with pytest.raises(ValueError):
        normalize_reg("$6")
    with pytest.raises(ValueError):
        normalize_reg("$PC")
    assert not is_reg("$high")
