"""Unit tests for servicecatalogue.keywords."""

from __future__ import annotations

from servicecatalogue.keywords import build_keyword_index, fold, has_keyword
from servicecatalogue.models.resource import ServiceResource
from tests.factories import resource_payload


def _resource(identifier: str, *words: str | None) -> ServiceResource:
    return ServiceResource.model_validate(resource_payload(identifier, *words))


class TestBuildKeywordIndex:
    def test_dedup_keeps_first_casing_and_sorts(self) -> None:
        resources = [_resource("a", "Skatt", "skatt", "MVA", "")]
        assert build_keyword_index(resources) == ["MVA", "Skatt"]

    def test_first_seen_casing_across_resources(self) -> None:
        resources = [_resource("a", "helse"), _resource("b", "HELSE", "Helse")]
        assert build_keyword_index(resources) == ["helse"]

    def test_blank_and_null_words_dropped(self) -> None:
        resources = [_resource("a", "", "   ", "\t\n", None, "Toll")]
        assert build_keyword_index(resources) == ["Toll"]

    def test_sort_ignores_case(self) -> None:
        resources = [_resource("a", "beta", "Alpha", "gamma", "Delta")]
        assert build_keyword_index(resources) == ["Alpha", "beta", "Delta", "gamma"]

    def test_resources_without_keywords(self) -> None:
        resources = [
            ServiceResource(identifier="none"),
            ServiceResource.model_validate({"identifier": "null", "keywords": None}),
            _resource("empty"),
        ]
        assert build_keyword_index(resources) == []

    def test_empty_list(self) -> None:
        assert build_keyword_index([]) == []

    def test_words_kept_verbatim(self) -> None:
        resources = [_resource("a", " Avgift ")]
        assert build_keyword_index(resources) == [" Avgift "]

    def test_norwegian_letters(self) -> None:
        resources = [_resource("a", "øl", "Ærlig", "ØL", "åker")]
        assert build_keyword_index(resources) == ["åker", "Ærlig", "øl"]


class TestFold:
    def test_upper_cases_each_character(self) -> None:
        assert fold("Skatt-åtgang") == "SKATT-ÅTGANG"

    def test_expanding_characters_are_kept(self) -> None:
        assert fold("straße") == "STRAßE"
        assert len(fold("ŉ")) == 1

    def test_sharp_s_does_not_match_double_s(self) -> None:
        assert not has_keyword(_resource("a", "Maße"), "MASSE")
        assert has_keyword(_resource("a", "Maße"), "MAßE")


class TestHasKeyword:
    def test_case_insensitive_match(self) -> None:
        assert has_keyword(_resource("a", "Skatt"), "skatt")
        assert has_keyword(_resource("a", "skatt"), "SKATT")

    def test_no_substring_match(self) -> None:
        assert not has_keyword(_resource("a", "skattemelding"), "skatt")
        assert not has_keyword(_resource("a", "skatt"), "skattemelding")

    def test_no_keywords(self) -> None:
        assert not has_keyword(ServiceResource(identifier="a"), "skatt")

    def test_null_word_never_matches(self) -> None:
        assert not has_keyword(_resource("a", None), "")
