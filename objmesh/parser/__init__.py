"""
Пакет parser – лексер, разбор записей v/vn/vt/f и построчный загрузчик OBJ.
"""

from objmesh.parser.lexer import preprocess_line, split_by_string, strip_comment, tokenize
from objmesh.parser.attributes import parse_floats, parse_vec2, parse_vec3
from objmesh.parser.faces import parse_face, parse_vertex_ref
from objmesh.parser.loader import ObjLoader, load_obj

__all__ = [
    "preprocess_line", "split_by_string", "strip_comment", "tokenize",
    "parse_floats", "parse_vec2", "parse_vec3",
    "parse_face", "parse_vertex_ref",
    "ObjLoader", "load_obj",
]
