"""End-to-end search scenarios through the public package API."""

import re

import pytest
from fuzzy_haystack import (
    Haystack,
    KeyedCandidates,
    OrderedCandidates,
    SearchOptions,
    levenshtein,
    tokenize,
)


class TestSearchScenarios:
    """Integration tests covering the documented search behaviour."""

    @pytest.fixture
    def countries(self):
        """Suggestion list for search-as-you-type scenarios."""
        return [
            "United States",
            "United Kingdom",
            "Canada",
            "Germany",
            "France",
            "New Zealand",
            "South Africa",
        ]

    def test_dessert_scrambled_order(self):
        """Test the scrambled token scenario."""
        engine = Haystack()
        source = ["apple pie", "banana split", "cherry tart"]

        assert engine.search("pie apple", source) == ["apple pie"]

    def test_kitten_sitting_mapping(self):
        """Test the mapping scenario with a loose threshold."""
        engine = Haystack({"flexibility": 3})
        results = engine.search("kitten", {"a": "kitten", "b": "sitting"}, limit=2)

        assert results == ["kitten", "sitting"]

    def test_tokenize_scenario(self):
        """Test the comma tokenization scenario."""
        assert tokenize("a,b,c", ",") == ["a", "b", "c"]

    def test_typing_progressively(self, countries):
        """Test results while a query is being typed."""
        engine = Haystack()

        assert engine.search("u", countries, limit=10) is not None
        assert engine.search("united", countries, limit=10) == ["United States", "United Kingdom"]
        assert engine.search("united k", countries, limit=10) == ["United Kingdom"]

    def test_typo_in_suggestion(self, countries):
        """Test a misspelled query against the suggestion list."""
        engine = Haystack()

        assert engine.search("Frnace", countries) == ["France"]
        assert engine.search("germny", countries) == ["Germany"]

    def test_scrambled_multiword(self, countries):
        """Test reversed word order against the suggestion list."""
        assert Haystack().search("zealand new", countries) == ["New Zealand"]

    def test_every_option_together(self, countries):
        """Test stop words, exclusions, stemming and case folding combined."""
        engine = Haystack(
            SearchOptions(
                ignoreStopWords=True,
                exclusions=re.compile(r"[!?.]"),
                stemming=True,
            )
        )

        assert engine.search("The Canadas?!", countries) == ["Canada"]

    def test_ranking_invariant(self, countries):
        """Test that results never get closer to the query further down."""
        engine = Haystack(flexibility=6)
        query = "united"
        results = engine.search(query, countries, limit=len(countries))

        distances = [levenshtein(query, value.lower()) for value in results]
        assert distances == sorted(distances)

    def test_no_duplicates_with_repeated_source(self, countries):
        """Test deduplication across a source with repeated entries."""
        results = Haystack().search("united", countries * 3, limit=20)

        assert len(results) == len(set(results))

    def test_keyed_variant_with_detailed_response(self):
        """Test keyed candidates with per-result keys."""
        engine = Haystack(flexibility=1)
        products = KeyedCandidates(mapping={"sku-1": "Blue Shirt", "sku-2": "Red Shirt", "sku-3": "Blue Jeans"})

        response = engine.search_detailed("shirt blue", products, limit=5)

        assert [r.key for r in response.results] == ["sku-1"]
        assert response.matched_values() == ["Blue Shirt"]

    def test_ordered_variant_empty_query(self):
        """Test that an empty query gives no result for any source."""
        engine = Haystack()

        for source in (OrderedCandidates(items=["a"]), KeyedCandidates(mapping={"k": "a"}), ["a"], {"k": "a"}, None):
            assert engine.search("", source) is None
