from __future__ import annotations

from typing import Iterator, List, Sequence

from ..models.pattern import ThreadRef

PRIMARY_SYMBOLS = list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
SECONDARY_SYMBOLS = list("0123456789!@#$%^&*()[]{}<>+-=;:,")
GLYPH_SYMBOLS = [chr(0x25A0 + i) for i in range(16)]
MAX_SYMBOLS = 400


def _symbol_generator() -> Iterator[str]:
    """Letters first, then digits and punctuation, then box glyphs, then numbered ``#n`` fallbacks."""
    for bucket in (PRIMARY_SYMBOLS, SECONDARY_SYMBOLS, GLYPH_SYMBOLS):
        yield from bucket
    idx = 1
    while True:
        yield f"#{idx}"
        idx += 1


def _normalise_symbol(symbol: str | None) -> str | None:
    if not symbol:
        return None
    symbol = symbol.strip()
    if not symbol or len(symbol) > 3:
        return None
    return symbol


def assign_symbols_to_palette(threads: Sequence[ThreadRef]) -> List[ThreadRef]:
    """Give every thread a unique chart symbol, keeping usable symbols it already has."""
    if len(threads) > MAX_SYMBOLS:
        raise ValueError(f"Too many unique colors (max {MAX_SYMBOLS})")

    generator = _symbol_generator()
    used: set[str] = set()
    result: List[ThreadRef] = []

    for thread in threads:
        symbol = _normalise_symbol(thread.symbol)
        if symbol and symbol not in used:
            assigned = symbol
        else:
            assigned = next(generator)
            while assigned in used:
                assigned = next(generator)
        used.add(assigned)
        result.append(thread.model_copy(update={"symbol": assigned}))

    return result
