"""Tests for income statement classification."""

from cashbook.domain.classifier import (
    DEFAULT_KEYWORDS,
    ClassificationKeywords,
    classify,
    classify_category_name,
)
from cashbook.domain.entities import DreBucket, EntryKind, EntryStatus


def test_deduction_keywords():
    assert classify_category_name("Imposto de Renda") == DreBucket.DEDUCTION
    assert classify_category_name("Taxas bancárias") == DreBucket.DEDUCTION
    assert classify_category_name("TRIBUTOS") == DreBucket.DEDUCTION


def test_cost_keywords():
    assert classify_category_name("Matéria-prima") == DreBucket.COST
    assert classify_category_name("Compra de Mercadorias") == DreBucket.COST


def test_deduction_takes_precedence_over_cost():
    """A name matching both tables is a deduction."""
    assert classify_category_name("Imposto sobre produto") == DreBucket.DEDUCTION


def test_unmatched_and_missing_names_are_operating_expenses():
    assert classify_category_name("Aluguel") == DreBucket.OPERATING_EXPENSE
    assert classify_category_name(None) == DreBucket.OPERATING_EXPENSE
    assert classify_category_name("") == DreBucket.OPERATING_EXPENSE


def test_custom_keywords_are_normalized():
    keywords = ClassificationKeywords(deduction=(" FEE ",), cost=("Stock", ""))
    assert keywords.deduction == ("fee",)
    assert keywords.cost == ("stock",)
    assert classify_category_name("Card fees", keywords) == DreBucket.DEDUCTION
    assert classify_category_name("Imposto", keywords) == DreBucket.OPERATING_EXPENSE


def test_only_settled_outflows_are_classified(make_entry, make_category):
    category = make_category(1, "Imposto ISS")
    pending = make_entry(kind=EntryKind.OUTFLOW, category_id=1)
    inflow = make_entry(kind=EntryKind.INFLOW, status=EntryStatus.SETTLED, category_id=1)
    settled = make_entry(kind=EntryKind.OUTFLOW, status=EntryStatus.SETTLED, category_id=1)

    assert classify(pending, category) == DreBucket.NONE
    assert classify(inflow, category) == DreBucket.NONE
    assert classify(settled, category) == DreBucket.DEDUCTION


def test_kind_mismatch_classifies_by_entry_kind(make_entry, make_category, caplog):
    """An outflow filed under an inflow category is still classified by name."""
    category = make_category(1, "Custo de vendas", kind=EntryKind.INFLOW)
    entry = make_entry(kind=EntryKind.OUTFLOW, status=EntryStatus.SETTLED, category_id=1)

    with caplog.at_level("WARNING", logger="cashbook"):
        assert classify(entry, category) == DreBucket.COST

    assert "classifying by entry kind" in caplog.text


def test_default_keywords_contents():
    assert DEFAULT_KEYWORDS.deduction == ("imposto", "taxa", "dedução", "tributo")
    assert DEFAULT_KEYWORDS.cost == ("custo", "matéria", "produto", "insumo", "mercadoria")
