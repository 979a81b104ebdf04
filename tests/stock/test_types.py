"""
tests/stock/test_types.py - 데이터 모델 테스트
"""

import pytest
from conftest import function_item, make_arn

from lambstock.exceptions import ArgError
from lambstock.types import Function, SortKey, Tag, TagFilter


class TestFunction:
    """Function 데이터클래스 테스트"""

    def test_from_api(self):
        """FunctionConfiguration 변환"""
        func = Function.from_api(function_item("orders", code_size=2048, runtime="python3.12"))

        assert func.name == "orders"
        assert func.arn == make_arn("orders")
        assert func.runtime == "python3.12"
        assert func.code_size == 2048

    def test_from_api_container_image(self):
        """컨테이너 이미지 함수는 Runtime이 없음"""
        func = Function.from_api(function_item("image-fn", runtime=None))
        assert func.runtime == ""

    def test_from_api_missing_arn(self):
        """필수 필드 누락"""
        with pytest.raises(KeyError):
            Function.from_api({"FunctionName": "broken"})

    def test_frozen(self):
        """불변 객체"""
        func = Function(name="a", arn="arn", runtime="python3.12", code_size=1)
        with pytest.raises(AttributeError):
            func.name = "b"  # type: ignore[misc]

    def test_to_dict(self):
        func = Function(name="a", arn="arn", runtime="python3.12", code_size=1)
        assert func.to_dict() == {"name": "a", "arn": "arn", "runtime": "python3.12", "code_size": 1}


class TestTag:
    """Tag 데이터클래스 테스트"""

    def test_str(self):
        assert str(Tag(key="team", value="x")) == "team=x"

    def test_hashable(self):
        """같은 key/value/arn은 같은 태그"""
        tags = {Tag("team", "x", "arn1"), Tag("team", "x", "arn1"), Tag("team", "x", "arn2")}
        assert len(tags) == 2

    def test_pair(self):
        assert Tag("team", "x", "arn1").pair == ("team", "x")


class TestTagFilterParse:
    """TagFilter.parse() 테스트"""

    def test_parse_basic(self):
        assert TagFilter.parse("team=x") == TagFilter(key="team", value="x")

    def test_parse_value_with_equals(self):
        """첫 번째 '='에서만 분리"""
        assert TagFilter.parse("expr=a=b") == TagFilter(key="expr", value="a=b")

    @pytest.mark.parametrize(
        "expression, reason",
        [
            ("team", "tag_format"),
            ("team=", "tag_empty_value"),
            ("=x", "tag_empty_key"),
            ("=", "tag_empty_key"),
            ("", "tag_format"),
        ],
    )
    def test_parse_invalid(self, expression, reason):
        """'=' 누락, 빈 키, 빈 값"""
        with pytest.raises(ArgError) as exc_info:
            TagFilter.parse(expression)
        assert exc_info.value.argument == expression
        assert exc_info.value.exit_code == 2
        assert exc_info.value.reason == reason


class TestTagFilterMatches:
    """TagFilter.matches() 테스트"""

    def test_exact_match(self):
        assert TagFilter("team", "x").matches([Tag("team", "x")]) is True

    def test_case_sensitive_key(self):
        assert TagFilter("Team", "x").matches([Tag("team", "x")]) is False

    def test_case_sensitive_value(self):
        assert TagFilter("team", "X").matches([Tag("team", "x")]) is False

    def test_key_only_match(self):
        """키만 같고 값이 다르면 불일치"""
        assert TagFilter("team", "x").matches([Tag("team", "y")]) is False

    def test_no_tags(self):
        assert TagFilter("team", "x").matches([]) is False


class TestSortKey:
    """SortKey 테스트"""

    def test_choices(self):
        assert SortKey.choices() == ["name", "codesize", "runtime"]

    def test_parse(self):
        assert SortKey.parse("codesize") is SortKey.CODE_SIZE

    def test_parse_invalid(self):
        with pytest.raises(ArgError) as exc_info:
            SortKey.parse("memory")
        assert exc_info.value.reason == "sort_key"
        assert exc_info.value.params == {"choices": "name, codesize, runtime"}
