# oglgame

A small framework for writing OpenGL 3D games in Python on top of pyglet.
It opens a fixed 1024×768 window titled "OGL3D | OpenGL 3D Game", asks for
an OpenGL 4.6 core context, and runs a game loop. It also wraps the GPU
objects a simple renderer needs:

- `oglgame.vertex_array.VertexArrayObject`: interleaved float vertex data
  with its attribute layout.
- `oglgame.uniform_buffer.UniformBuffer`: a fixed-size uniform buffer that
  you overwrite each frame with `set_data()`.
- `oglgame.shader_program.ShaderProgram`: a vertex and a fragment shader
  read from files, compiled and linked.
- `oglgame.engine.GraphicsEngine`: creates these objects and issues clear,
  viewport, bind and draw calls.
- `oglgame.geometry`: `Vec4`, `Rect` and `Mat4`.
- `oglgame.prerequisites`: the descriptors (`VertexBufferDesc`,
  `VertexAttribute`, `ShaderProgramDesc`, `UniformBufferDesc`), the enums
  `TriangleType` and `ShaderType`, and `EngineError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demos

```
oglgame
oglgame --demo triangle
oglgame --demo animation
oglgame --demo matrix
```

`--demo` picks one of the games in `oglgame.demos`; the default is `matrix`.

- `triangle` (`TriangleGame`) draws a triangle with a colour at each corner.
- `animation` (`AnimationGame`) draws a quad whose size pulses as
  `|sin(t)|`, passed to the shader through a one-float uniform buffer.
- `matrix` (`MatrixGame`) draws a quad rotating about all three axes, passed
  to the shader as a 4×4 world matrix (see `world_matrix()`).

The demos read their shaders from `Assets/Shaders/BasicShader.vert` and
`Assets/Shaders/BasicShader.frag`, relative to the current directory. The
animation and matrix demos bind a uniform block named `UniformData` to slot
0. If a shader file is missing or fails to compile, an `OGL3D Warning:` line
is written to standard error and the demo keeps running. Close the window to
quit. The command exits with status 0, or prints the error and exits with -1
if the game raised.

## Writing your own game

Subclass `Game` and override its hooks. The engine is `self.engine` and the
window is `self.display`; the viewport is already set to the window size.

```python
from oglgame.game import Game
from oglgame.geometry import Vec4
from oglgame.prerequisites import (
    ShaderProgramDesc,
    TriangleType,
    VertexAttribute,
    VertexBufferDesc,
)


class MyGame(Game):
    def on_create(self):
        vertices = [
            -0.5, -0.5, 0.0, 1, 0, 0,
             0.5, -0.5, 0.0, 0, 1, 0,
             0.0,  0.5, 0.0, 0, 0, 1,
        ]
        self.vao = self.engine.create_vertex_array_object(
            VertexBufferDesc(
                vertices=vertices,
                vertex_size=4 * 6,
                list_size=3,
                attributes=[VertexAttribute(3), VertexAttribute(3)],
            )
        )
        self.shader = self.engine.create_shader_program(
            ShaderProgramDesc("shader.vert", "shader.frag")
        )

    def on_update(self):
        self.engine.clear(Vec4(0, 0, 0, 1))
        self.engine.set_vertex_array_object(self.vao)
        self.engine.set_shader_program(self.shader)
        self.engine.draw_triangles(TriangleType.TRIANGLE_LIST, 3, 0)
        self.display.present(False)

    def on_quit(self):
        self.shader.release()
        self.vao.release()


MyGame().run()
```

`run()` calls `on_create()` once, then `on_update()` on every pass of the
loop until the window is closed or `quit()` is called, then `on_quit()`. The
window is closed when `run()` ends, even if a hook raised. `self.clock` is a
`FrameClock`; its `tick()` returns the seconds since the previous tick, and
0 on the first one.

`VertexArrayObject`, `UniformBuffer` and `ShaderProgram` each have a
`release()` method that frees their GPU objects (calling it twice is
harmless), and each can be used as a context manager.

## Matrices

`Mat4` is row-major, identity by default, and uses the row-vector
convention: translation sits in the bottom row. Combine transforms left to
right with `*=` or `@`:

```python
from oglgame.geometry import Mat4

world = Mat4()
rotation = Mat4()
rotation.set_rotation_z(0.5)
world *= rotation
moved = world @ Mat4()
data = world.to_bytes()  # 64 bytes, ready for UniformBuffer.set_data()
```

## Errors

Framework errors raise `EngineError`, a `RuntimeError` whose message starts
with `OGL3D Error:`; for instance creating a vertex array with no vertices,
or passing `set_data()` fewer bytes than the buffer holds.

## What it does not do

There is no keyboard or mouse input, camera, projection or depth testing:
the loop only draws and watches for the window being closed. No shader files
ship with the package; supply your own.