"""Tests for signpost.routing.pattern — tokenizer and pattern compiler."""

import pytest

from signpost.routing.pattern import (
    Segment,
    SegmentKind,
    compile_pattern,
    duplicate_params,
    param_names,
    split_path,
)


def _static(text: str) -> Segment:
    return Segment(SegmentKind.STATIC, text)


def _param(name: str) -> Segment:
    return Segment(SegmentKind.PARAM, name)


class TestSplitPath:
    @pytest.mark.parametrize("path", ["/a", "/a/", "//a//", "a", "/a?x=1", "/a/?x=1&y=2"])
    def test_edge_slashes_and_query_ignored(self, path: str) -> None:
        assert split_path(path) == ["a"]

    @pytest.mark.parametrize("path", ["", "/", "///", "?x=1", "/?x=1"])
    def test_root(self, path: str) -> None:
        assert split_path(path) == []

    def test_nested(self) -> None:
        assert split_path("/api/v2/users") == ["api", "v2", "users"]

    def test_interior_double_slash_keeps_empty_token(self) -> None:
        assert split_path("/a//b") == ["a", "", "b"]

    def test_query_cut_at_first_question_mark(self) -> None:
        assert split_path("/a/b?c/d?e") == ["a", "b"]

    def test_no_decoding(self) -> None:
        assert split_path("/files/a%20b") == ["files", "a%20b"]


class TestCompilePattern:
    def test_static(self) -> None:
        segments = compile_pattern("/health")
        assert segments == (_static("health"),)
        assert segments[0].is_param is False

    def test_root(self) -> None:
        assert compile_pattern("/") == ()
        assert compile_pattern("") == ()

    def test_colon_param(self) -> None:
        segments = compile_pattern("/users/:id")
        assert segments == (_static("users"), _param("id"))
        assert segments[1].is_param is True

    def test_brace_params(self) -> None:
        assert compile_pattern("/posts/{postId}/comments/{id}") == (
            _static("posts"),
            _param("postId"),
            _static("comments"),
            _param("id"),
        )

    def test_lone_colon_is_static(self) -> None:
        assert compile_pattern("/a/:") == (_static("a"), _static(":"))

    def test_empty_braces_are_static(self) -> None:
        assert compile_pattern("/a/{}") == (_static("a"), _static("{}"))

    def test_unbalanced_brace_is_static(self) -> None:
        assert compile_pattern("/{id") == (_static("{id"),)
        assert compile_pattern("/id}") == (_static("id}"),)

    def test_colon_inside_token_is_static(self) -> None:
        assert compile_pattern("/a:b") == (_static("a:b"),)

    def test_param_name_kept_verbatim(self) -> None:
        assert compile_pattern("/:user-id") == (_param("user-id"),)
        assert compile_pattern("/{a:b}") == (_param("a:b"),)

    def test_query_and_trailing_slash_stripped(self) -> None:
        assert compile_pattern("/users/:id/?debug") == (_static("users"), _param("id"))

    def test_interior_empty_segment_is_static(self) -> None:
        assert compile_pattern("/a//b") == (_static("a"), _static(""), _static("b"))

    def test_segment_count_matches_tokens(self) -> None:
        pattern = "/a/:b/{c}/d/"
        assert len(compile_pattern(pattern)) == len(split_path(pattern))


class TestSegment:
    def test_frozen(self) -> None:
        seg = _static("users")
        with pytest.raises(AttributeError):
            seg.text = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _param("id") == _param("id")
        assert _param("id") != _static("id")


class TestParamNames:
    def test_in_order(self) -> None:
        assert param_names(compile_pattern("/posts/{postId}/comments/:id")) == ["postId", "id"]

    def test_repeats_kept(self) -> None:
        assert param_names(compile_pattern("/a/:x/:x")) == ["x", "x"]

    def test_duplicates(self) -> None:
        assert duplicate_params(compile_pattern("/a/:x/{y}/{x}/:y/:z")) == ["x", "y"]

    def test_no_duplicates(self) -> None:
        assert duplicate_params(compile_pattern("/a/:x/:y")) == []
