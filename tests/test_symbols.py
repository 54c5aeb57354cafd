from price_tracker.symbols import DEFAULT_SYMBOLS, select_symbols
from price_tracker.types import SymbolConfig


def test_empty_selection_uses_all_defaults() -> None:
    assert select_symbols([]) == DEFAULT_SYMBOLS


def test_default_symbols_are_unique() -> None:
    symbols = [cfg.symbol for cfg in DEFAULT_SYMBOLS]
    assert len(symbols) == len(set(symbols))


def test_selection_keeps_order_and_drops_duplicates() -> None:
    selected = select_symbols(["xrpusdt", "BTCUSDT", "XRPUSDT"])

    assert [cfg.symbol for cfg in selected] == ["XRPUSDT", "BTCUSDT"]
    assert selected[0].precision == 4
    assert selected[0].color == "magenta"


def test_unknown_symbol_gets_generic_config() -> None:
    (cfg,) = select_symbols(["PEPEUSDT"])

    assert cfg == SymbolConfig(
        symbol="PEPEUSDT",
        display_name="PEPEUSDT",
        color="white",
        precision=2,
    )
