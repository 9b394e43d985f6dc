from obadh.input_engine import InputEngine


def test_basic_input():
    engine = InputEngine()
    assert engine.process_char("k") == "ক"
    # 'k' is consumed as soon as it matches, so 'h' alone has no mapping.
    assert engine.process_char("h") is None


def test_g_maps():
    engine = InputEngine()
    assert engine.process_char("g") == "গ"


def test_unmapped_char_returns_none():
    engine = InputEngine()
    assert engine.process_char("x") is None


def test_suffix_match_after_unmapped():
    engine = InputEngine()
    assert engine.process_char("x") is None
    assert engine.process_char("k") == "ক"
    assert engine.process_char("g") == "গ"


def test_repeated_matches():
    engine = InputEngine()
    results = [engine.process_char(c) for c in "kgk"]
    assert results == ["ক", "গ", "ক"]