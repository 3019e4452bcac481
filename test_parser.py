# -*- coding: utf-8 -*-
import pytest

from objmesh.errors import (
    InvalidArity, InvalidIndexFormat, MalformedNumber, TooFewVertices,
)
from objmesh.math import Vec2, Vec3
from objmesh.mesh import ABSENT, VertexRef
from objmesh.parser import (
    parse_face, parse_floats, parse_vec2, parse_vec3, parse_vertex_ref,
    preprocess_line, split_by_string, strip_comment, tokenize,
)


# ---------------------------------------------------------------------
# preprocess_line
# ---------------------------------------------------------------------
@pytest.mark.parametrize("raw", [
    "v  1.0   2.0 3.0",
    "  f 1 2\t\t3  ",
    "\t\tg   my   group",
    "no-whitespace-at-all",
])
def test_preprocess_has_no_consecutive_whitespace(raw):
    out = preprocess_line(raw)
    assert all(not (a.isspace() and b.isspace()) for a, b in zip(out, out[1:]))
    assert out.split() == raw.split()

def test_preprocess_keeps_single_leading_character():
    assert preprocess_line(" v 1 2 3") == " v 1 2 3"
    assert preprocess_line("   v 1") == " v 1"
    assert preprocess_line("v 1 2 3  ") == "v 1 2 3 "

def test_preprocess_canonical_replacement():
    assert preprocess_line("v\t1 \t 2", " ") == "v 1 2"

def test_strip_comment():
    assert strip_comment("v 1 2 3 # corner") == "v 1 2 3 "
    assert strip_comment("# only a comment") == ""


# ---------------------------------------------------------------------
# split_by_string
# ---------------------------------------------------------------------
def test_split_keeps_or_removes_empty_tokens():
    assert split_by_string("a//b", "/") == ["a", "", "b"]
    assert split_by_string("a//b", "/", remove_empty=True) == ["a", "b"]

def test_split_separator_not_found():
    assert split_by_string("abc", "/") == ["abc"]

def test_split_trailing_separator():
    assert split_by_string("1/2/", "/") == ["1", "2", ""]
    assert split_by_string("1/2/", "/", remove_empty=True) == ["1", "2"]

def test_split_multi_character_separator():
    assert split_by_string("a::b::c", "::") == ["a", "b", "c"]

def test_split_rejects_empty_separator():
    with pytest.raises(ValueError):
        split_by_string("abc", "")

def test_tokenize_full_line():
    assert tokenize("  v   1.0\t2.0  3.0   # note") == ["v", "1.0", "2.0", "3.0"]
    assert tokenize("   ") == []
    assert tokenize("# header") == []


# ---------------------------------------------------------------------
# attributes
# ---------------------------------------------------------------------
def test_parse_vec3():
    assert parse_vec3(["1.0", "-2.5", "3e2"]) == Vec3(1.0, -2.5, 300.0)

def test_parse_vec3_homogeneous_component_is_truncated():
    assert parse_vec3(["1", "2", "3", "0.5"]) == Vec3(1, 2, 3)

def test_parse_vec2_accepts_depth_component():
    assert parse_vec2(["0.5", "0.25", "0"]) == Vec2(0.5, 0.25)

@pytest.mark.parametrize("tokens", [["1", "2"], ["1", "2", "3", "4", "5"], []])
def test_parse_vec3_arity(tokens):
    with pytest.raises(InvalidArity) as info:
        parse_vec3(tokens)
    assert info.value.count == len(tokens)

@pytest.mark.parametrize("tokens", [["1"], ["1", "2", "3", "4"]])
def test_parse_vec2_arity(tokens):
    with pytest.raises(InvalidArity):
        parse_vec2(tokens)

def test_malformed_number_carries_token():
    with pytest.raises(MalformedNumber) as info:
        parse_floats(["1.0", "abc", "2"], (3, 4))
    assert info.value.token == "abc"

def test_empty_token_is_malformed():
    with pytest.raises(MalformedNumber):
        parse_floats(["1.0", "", "2"], (3, 4))

@pytest.mark.parametrize("token", ["nan", "-inf", "Infinity", "1_0", "1e999", "\uff11"])
def test_non_decimal_or_non_finite_number_is_malformed(token):
    with pytest.raises(MalformedNumber) as info:
        parse_floats(["0", token, "0"], (3, 4))
    assert info.value.token == token

@pytest.mark.parametrize("token, value", [("-1.5", -1.5), ("+2", 2.0), (".5", 0.5),
                                          ("3.", 3.0), ("1e-3", 0.001), ("2E+2", 200.0)])
def test_decimal_literals_are_accepted(token, value):
    assert parse_floats([token, "0", "0"], (3, 4))[0] == pytest.approx(value)


# ---------------------------------------------------------------------
# faces
# ---------------------------------------------------------------------
def test_vertex_ref_formats():
    assert parse_vertex_ref("3") == VertexRef(2, ABSENT, ABSENT)
    assert parse_vertex_ref("3/4") == VertexRef(2, 3, ABSENT)
    assert parse_vertex_ref("3//5") == VertexRef(2, ABSENT, 4)
    assert parse_vertex_ref("3/4/5") == VertexRef(2, 3, 4)

def test_face_preserves_winding():
    face = parse_face(["1/1/1", "2/2/1", "3/3/1"])
    assert face.position_indices() == [0, 1, 2]
    assert face.normal is None

def test_duplicate_references_count_toward_arity():
    assert len(parse_face(["1", "1", "1"])) == 3
    with pytest.raises(TooFewVertices) as info:
        parse_face(["1", "1"])
    assert info.value.count == 2

@pytest.mark.parametrize("token", ["1/2/3/4", "x", "1/a", "1.5", "0", "1_0", "\uff12", " 1"])
def test_invalid_index_format(token):
    with pytest.raises(InvalidIndexFormat):
        parse_face([token, "1", "2"])

def test_negative_index_rejected_without_pool_sizes():
    with pytest.raises(InvalidIndexFormat):
        parse_face(["-1", "-2", "-3"])

def test_negative_index_resolved_against_pool_sizes():
    face = parse_face(["-3/-1", "-2/-1", "-1/-1"], pool_sizes=(5, 2, 0))
    assert face.vertices == [VertexRef(2, 1, ABSENT),
                             VertexRef(3, 1, ABSENT),
                             VertexRef(4, 1, ABSENT)]

def test_relative_index_before_start_of_pool():
    with pytest.raises(InvalidIndexFormat):
        parse_face(["-4", "1", "2"], pool_sizes=(3, 0, 0))
