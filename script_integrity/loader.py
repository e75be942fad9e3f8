# Copyright (C) 2026 Redcar & Cleveland Borough Council
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Loader code generation.

Turns a batch of attribute lists into a small inline script that creates one
script element per list and appends them next to a marker element. Scripts
created this way are not parser-inserted, so a ``'strict-dynamic'`` policy
trusts them through the loader that created them.

The code is first built as a list of instructions and only turned into text
by ``serialize_instructions``; ``js_literal`` is the single place deciding
how values are written into the generated source.
"""

import math
from typing import List, NamedTuple, Sequence, Tuple

from .attributes import AttributeList, Scalar

# Script properties that can be assigned directly on the DOM element.
# Anything else is set with setAttribute() as a string.
KNOWN_SCRIPT_PROPERTIES = frozenset(
    [
        "id",
        "src",
        "integrity",
        "async",
        "defer",
        "noModule",
        "crossOrigin",
        "nonce",
    ]
)

INDENT = "  "

_JS_STRING_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class CreateElement(NamedTuple):
    var: str


class SetProperty(NamedTuple):
    var: str
    name: str
    value: Scalar


class SetAttribute(NamedTuple):
    var: str
    name: str
    value: Scalar


class AppendToMarkerParent(NamedTuple):
    variables: Tuple[str, ...]
    marker_id: str


def quote_js_string(value: str) -> str:
    """Single-quoted JS string literal that cannot end the enclosing <script>."""
    escaped = value.translate(_JS_STRING_ESCAPES).replace("</", "<\\/")
    return f"'{escaped}'"


def js_literal(value: Scalar) -> str:
    """
    Write a scalar as a JS literal.

    Strings are quoted, booleans become ``true``/``false`` and numbers are
    written raw.
    """
    if isinstance(value, str):
        return quote_js_string(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    return str(value)


def _attribute_string(value: Scalar) -> str:
    # setAttribute() only ever sees strings
    if isinstance(value, str):
        return value
    return js_literal(value)


def build_loader_instructions(
    batch: Sequence[AttributeList], marker_id: str
) -> list:
    """Instructions creating every script of ``batch`` and appending them in order."""
    instructions = []
    variables = []
    for index, attrs in enumerate(batch):
        var = f"s{index}"
        variables.append(var)
        instructions.append(CreateElement(var))
        for name, value in attrs:
            if name in KNOWN_SCRIPT_PROPERTIES:
                instructions.append(SetProperty(var, name, value))
            else:
                instructions.append(SetAttribute(var, name, value))
    if variables:
        instructions.append(AppendToMarkerParent(tuple(variables), marker_id))
    return instructions


def _serialize_instruction(instruction) -> List[str]:
    if isinstance(instruction, CreateElement):
        return [f"var {instruction.var} = document.createElement('script');"]
    if isinstance(instruction, SetProperty):
        return [f"{instruction.var}.{instruction.name}={js_literal(instruction.value)};"]
    if isinstance(instruction, SetAttribute):
        name = quote_js_string(instruction.name)
        value = quote_js_string(_attribute_string(instruction.value))
        return [f"{instruction.var}.setAttribute({name}, {value});"]
    if isinstance(instruction, AppendToMarkerParent):
        return [
            f"var s = [{','.join(instruction.variables)}];",
            f"var p = document.getElementById({quote_js_string(instruction.marker_id)}).parentNode;",
            "s.forEach(function (si) {",
            f"{INDENT}p.appendChild(si);",
            "});",
        ]
    raise TypeError(f"Unknown loader instruction: {instruction!r}")


def serialize_instructions(instructions) -> str:
    """Render instructions as source, wrapped in an immediately invoked function."""
    if not instructions:
        return ""
    lines = ["(function () {"]
    for instruction in instructions:
        lines.extend(INDENT + line for line in _serialize_instruction(instruction))
    lines.append("})()")
    return "\n".join(lines) + "\n"


def create_hashable_script_loader(batch: Sequence[AttributeList], marker_id: str) -> str:
    """
    Inline loader code for ``batch``, or "" when there is nothing to load.

    The generated code looks up the element with id ``marker_id`` and appends
    the created scripts to its parent, so the loader must be rendered with that
    id.
    """
    return serialize_instructions(build_loader_instructions(batch, marker_id))
