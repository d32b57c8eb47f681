"""
Tests for text normalization, field extraction and the token index.
"""
import pytest
from catalog_index.extractors import (
    DEFAULT_FAMILY,
    FAMILIES,
    FAMILY_RULES,
    classify_family,
    extract_dimensions,
)
from catalog_index.indexer import index_tokens, intersect_indexes
from catalog_index.utils import normalize_text, tokenize


class TestNormalizeText:
    """Test canonical text folding."""

    def test_falsy_values(self):
        assert normalize_text(None) == ""
        assert normalize_text("") == ""
        assert normalize_text(0) == ""

    def test_lowercase(self):
        assert normalize_text("HELLO") == "hello"
        assert normalize_text("TeStE") == "teste"

    def test_strips_accents(self):
        assert normalize_text("café") == "cafe"
        assert normalize_text("ação") == "acao"
        assert normalize_text("Ângulo") == "angulo"
        assert normalize_text("perímetro") == "perimetro"

    def test_comma_as_decimal_point(self):
        assert normalize_text("3,5") == "3.5"
        assert normalize_text("100,00") == "100.00"

    def test_trims_but_keeps_inner_spaces(self):
        assert normalize_text("  HELLO  ") == "hello"
        assert normalize_text("a  b") == "a  b"

    def test_numbers(self):
        assert normalize_text(42) == "42"
        assert normalize_text(3.14) == "3.14"
        assert normalize_text(10.0) == "10"

    @pytest.mark.parametrize("raw", ["  Café, Ação ", "Perfil U Bandeja 10x20x0,95", "ÇÉÎÕÜ", "a  b"])
    def test_idempotent(self, raw):
        once = normalize_text(raw)
        assert normalize_text(once) == once


class TestTokenize:
    """Test token splitting."""

    def test_splits_on_non_token_characters(self):
        assert tokenize("001 perfil us 10x20x1.5") == ["001", "perfil", "us", "10x20x1.5"]

    def test_drops_empty_tokens(self):
        assert tokenize("  chapa -- aco/inox ") == ["chapa", "aco", "inox"]
        assert tokenize("") == []


class TestClassifyFamily:
    """Test first-match-wins family rules."""

    def test_specific_before_generic(self):
        assert classify_family("Perfil U Bandeja 10x20") == "U BANDEJA"
        assert classify_family("Perfil U Porta 35x20x1.25") == "U PORTA"
        assert classify_family("Perfil U 20x10") == "U"

    def test_us_and_ue(self):
        assert classify_family("Perfil US 10x20x1.5") == "US"
        assert classify_family("PERFIL UE 20x30x2,0") == "UE"

    def test_chapa(self):
        assert classify_family("Chapa 100x200x3.0") == "CHAPA"

    def test_fallback(self):
        assert classify_family("Parafuso M10") == DEFAULT_FAMILY
        assert classify_family(None) == "OUTROS"

    def test_rules_are_data(self):
        assert FAMILY_RULES[0] == ("perfil us", "US")
        assert set(FAMILIES) == {"US", "UE", "U BANDEJA", "U PORTA", "U", "CHAPA", "OUTROS"}
        assert classify_family("Parafuso M10", rules=(("parafuso", "FIXACAO"),)) == "FIXACAO"


class TestExtractDimensions:
    """Test dimension tuple extraction."""

    def test_three_dimensions(self):
        dims = extract_dimensions("Perfil US 10x20x1.5")
        assert dims.dimensions == [10, 20, 1.5]
        assert dims.thickness == 1.5

    def test_comma_decimal(self):
        dims = extract_dimensions("Perfil U Bandeja 40x15x0,95")
        assert dims.dimensions == [40, 15, 0.95]
        assert dims.thickness == 0.95

    def test_two_dimensions(self):
        dims = extract_dimensions("Chapa 1000X2000")
        assert dims.dimensions == [1000, 2000]
        assert dims.thickness == 2000

    def test_first_match_only(self):
        dims = extract_dimensions("Kit 2x3 com chapa 100x200x3")
        assert dims.dimensions == [2, 3]

    def test_no_dimensions(self):
        assert extract_dimensions("Parafuso M10") is None
        assert extract_dimensions("Arruela 10") is None
        assert extract_dimensions("") is None
        assert extract_dimensions(None) is None


class TestTokenIndex:
    """Test posting lists and intersection."""

    def test_repeated_token_posted_once(self):
        token_index = {}
        index_tokens(token_index, "perfil perfil us", 0)
        index_tokens(token_index, "perfil ue", 1)
        assert token_index["perfil"] == [0, 1]
        assert token_index["us"] == [0]
        assert token_index["ue"] == [1]

    def test_intersection_ascending(self):
        assert intersect_indexes([[5, 3, 1], [5, 1], [1, 9, 5]]) == [1, 5]

    def test_intersection_empty(self):
        assert intersect_indexes([]) == []
        assert intersect_indexes([[1, 2], [3], [1, 2, 3]]) == []
