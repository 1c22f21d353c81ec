from __future__ import annotations
from typing import Iterable, List
from .encoding import Encoded

def to_text_lines(words: Iterable[Encoded]) -> List[str]:
    return [w.text for w in words]

def write_lines(lines: Iterable[str], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")