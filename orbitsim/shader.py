"""Splitting a combined shader file into its vertex and fragment stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike


class ShaderType(Enum):
    NONE = -1
    VERTEX = 0
    FRAGMENT = 1


@dataclass(frozen=True)
class ShaderProgramSource:
    vertex_source: str
    fragment_source: str


def parse_shader_source(text: str) -> ShaderProgramSource:
    """Split text on ``#shader vertex`` / ``#shader fragment`` lines.

    Lines before the first recognised directive belong to no stage and are
    dropped; a ``#shader`` line naming neither stage keeps the current one.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    current = ShaderType.NONE
    stages: dict[ShaderType, list[str]] = {ShaderType.VERTEX: [], ShaderType.FRAGMENT: []}
    for line in lines:
        if "#shader" in line:
            if "vertex" in line:
                current = ShaderType.VERTEX
            elif "fragment" in line:
                current = ShaderType.FRAGMENT
        elif current is not ShaderType.NONE:
            stages[current].append(line + "\n")

    return ShaderProgramSource(
        "".join(stages[ShaderType.VERTEX]),
        "".join(stages[ShaderType.FRAGMENT]),
    )


def parse_shader(path: str | PathLike[str]) -> ShaderProgramSource:
    """Read and split the shader file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_shader_source(handle.read())