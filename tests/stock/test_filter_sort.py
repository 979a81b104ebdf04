"""
tests/stock/test_filter_sort.py - 필터/정렬 테스트
"""

import pytest
from conftest import make_arn, make_function, make_tags

from lambstock.filter import filter_functions
from lambstock.sorting import sort_functions
from lambstock.types import SortKey, TagFilter


def names(functions):
    return [func.name for func in functions]


class TestFilterFunctions:
    """filter_functions() 테스트"""

    def test_no_predicate_is_identity(self, sample_functions, sample_tag_map):
        """필터가 없으면 입력 그대로"""
        assert filter_functions(sample_functions, sample_tag_map) == sample_functions

    def test_retains_exact_match(self):
        """arn1에만 team=x가 있으면 arn1만 남음"""
        functions = [make_function("fn1"), make_function("fn2")]
        tag_map = {make_arn("fn1"): make_tags("fn1", team="x"), make_arn("fn2"): frozenset()}

        result = filter_functions(functions, tag_map, TagFilter("team", "x"))

        assert names(result) == ["fn1"]

    def test_untagged_never_matches(self, sample_functions):
        """tag_map에 없는 함수는 제외"""
        assert filter_functions(sample_functions, {}, TagFilter("team", "x")) == []

    def test_preserves_order(self, sample_functions, sample_tag_map):
        result = filter_functions(sample_functions, sample_tag_map, TagFilter("env", "prod"))
        assert names(result) == ["b", "a"]

    def test_idempotent(self, sample_functions, sample_tag_map):
        predicate = TagFilter("team", "x")
        once = filter_functions(sample_functions, sample_tag_map, predicate)
        twice = filter_functions(once, sample_tag_map, predicate)
        assert once == twice

    @pytest.mark.parametrize("predicate", [None, TagFilter("team", "x"), TagFilter("env", "prod"), TagFilter("no", "pe")])
    def test_never_grows(self, sample_functions, sample_tag_map, predicate):
        assert len(filter_functions(sample_functions, sample_tag_map, predicate)) <= len(sample_functions)

    def test_shared_tag_returns_input_unchanged(self):
        """모든 함수에 있는 태그로 필터링하면 원본과 동일"""
        functions = [make_function("z"), make_function("m"), make_function("a")]
        tag_map = {make_arn(func.name): make_tags(func.name, owner="ops") for func in functions}

        assert filter_functions(functions, tag_map, TagFilter("owner", "ops")) == functions


class TestSortFunctions:
    """sort_functions() 테스트"""

    @pytest.fixture
    def two_functions(self):
        return [
            make_function("b", code_size=200, runtime="nodejs"),
            make_function("a", code_size=100, runtime="python"),
        ]

    def test_no_key_preserves_order(self, sample_functions):
        assert sort_functions(sample_functions) == sample_functions

    def test_sort_by_name(self, two_functions):
        assert names(sort_functions(two_functions, SortKey.NAME)) == ["a", "b"]

    def test_sort_by_code_size(self, two_functions):
        result = sort_functions(two_functions, SortKey.CODE_SIZE)
        assert [(func.name, func.code_size) for func in result] == [("a", 100), ("b", 200)]

    def test_code_size_is_numeric(self):
        """문자열 비교가 아닌 숫자 비교"""
        functions = [make_function("big", code_size=1000), make_function("small", code_size=9)]
        assert names(sort_functions(functions, SortKey.CODE_SIZE)) == ["small", "big"]

    def test_name_is_case_sensitive(self):
        """대문자가 소문자보다 앞 (코드 포인트 순)"""
        functions = [make_function("alpha"), make_function("Beta")]
        assert names(sort_functions(functions, SortKey.NAME)) == ["Beta", "alpha"]

    def test_runtime_groups_and_is_stable(self, sample_functions):
        """같은 런타임은 묶이고 입력 순서 유지"""
        result = sort_functions(sample_functions, SortKey.RUNTIME)
        assert names(result) == ["b", "c", "a"]

    def test_code_size_ties_are_stable(self):
        functions = [make_function(name, code_size=10) for name in ["q", "e", "w"]]
        assert names(sort_functions(functions, SortKey.CODE_SIZE)) == ["q", "e", "w"]

    @pytest.mark.parametrize("key", list(SortKey))
    def test_idempotent(self, sample_functions, key):
        once = sort_functions(sample_functions, key)
        assert sort_functions(once, key) == once

    def test_does_not_mutate_input(self, sample_functions):
        original = list(sample_functions)
        sort_functions(sample_functions, SortKey.NAME)
        assert sample_functions == original
