from types import SimpleNamespace
from unittest.mock import MagicMock, call

import pytest

from oglgame.engine import GraphicsEngine
from oglgame.geometry import Rect, Vec4
from oglgame.prerequisites import EngineError, TriangleType, VertexBufferDesc


@pytest.fixture
def gl():
    fake = MagicMock()
    fake.GL_COLOR_BUFFER_BIT = "color-bit"
    fake.GL_UNIFORM_BUFFER = "uniform-buffer"
    fake.GL_TRIANGLES = "triangles"
    fake.GL_TRIANGLE_STRIP = "triangle-strip"
    return fake


def test_gl_namespace_is_the_one_given(gl):
    assert GraphicsEngine(gl).gl is gl


def test_clear_sets_color_then_clears(gl):
    GraphicsEngine(gl).clear(Vec4(0, 0, 0, 1))
    assert gl.glClearColor.call_args == call(0, 0, 0, 1)
    assert gl.glClear.call_args == call("color-bit")


def test_set_viewport_passes_left_top_width_height(gl):
    GraphicsEngine(gl).set_viewport(Rect(1024, 768, 5, 7))
    assert gl.glViewport.call_args == call(5, 7, 1024, 768)


def test_set_viewport_default_position_is_origin(gl):
    GraphicsEngine(gl).set_viewport(Rect(1024, 768))
    assert gl.glViewport.call_args == call(0, 0, 1024, 768)


def test_set_vertex_array_object_binds_its_id(gl):
    GraphicsEngine(gl).set_vertex_array_object(SimpleNamespace(id=3))
    assert gl.glBindVertexArray.call_args == call(3)


def test_set_uniform_buffer_binds_to_slot(gl):
    GraphicsEngine(gl).set_uniform_buffer(SimpleNamespace(id=9), 0)
    assert gl.glBindBufferBase.call_args == call("uniform-buffer", 0, 9)


def test_set_shader_program_uses_its_id(gl):
    GraphicsEngine(gl).set_shader_program(SimpleNamespace(id=11))
    assert gl.glUseProgram.call_args == call(11)


def test_draw_triangle_strip(gl):
    GraphicsEngine(gl).draw_triangles(TriangleType.TRIANGLE_STRIP, 4, 0)
    assert gl.glDrawArrays.call_args == call("triangle-strip", 0, 4)


def test_draw_triangle_list(gl):
    GraphicsEngine(gl).draw_triangles(TriangleType.TRIANGLE_LIST, 3, 2)
    assert gl.glDrawArrays.call_args == call("triangles", 2, 3)


def test_draw_accepts_plain_integer_type(gl):
    GraphicsEngine(gl).draw_triangles(1, 4, 0)
    assert gl.glDrawArrays.call_args == call("triangle-strip", 0, 4)


def test_draw_rejects_unknown_type(gl):
    with pytest.raises(ValueError):
        GraphicsEngine(gl).draw_triangles(7, 3, 0)
    assert gl.glDrawArrays.call_count == 0


def test_create_vertex_array_object_rejects_empty_list(gl):
    desc = VertexBufferDesc(vertices=(0.0,) * 6, vertex_size=24, list_size=0)
    with pytest.raises(EngineError, match="list_size is NULL"):
        GraphicsEngine(gl).create_vertex_array_object(desc)


def test_create_vertex_array_object_rejects_zero_vertex_size(gl):
    desc = VertexBufferDesc(vertices=(0.0,) * 6, vertex_size=0, list_size=1)
    with pytest.raises(EngineError, match="vertex_size is NULL"):
        GraphicsEngine(gl).create_vertex_array_object(desc)


def test_create_vertex_array_object_rejects_missing_vertices(gl):
    desc = VertexBufferDesc(vertices=(), vertex_size=24, list_size=3)
    with pytest.raises(EngineError, match="vertices is NULL"):
        GraphicsEngine(gl).create_vertex_array_object(desc)