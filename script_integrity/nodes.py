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
Element nodes handled by the script integrity helpers.

A node is a tagged element: a ``kind`` (the tag name), an ordered property
bag and an optional body. Only ``script`` nodes are ever transformed; every
other kind is passed through untouched.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

SCRIPT_KIND = "script"


@dataclass(frozen=True)
class ScriptNode:
    """
    An element as handed over by the rendering layer.

    Attributes:
        kind: Tag name of the element, e.g. ``"script"``
        props: Attribute name to value, in declaration order
        children: ``None``, a single string of inline code, another node or a list
        raw_body: Markup embedded verbatim by the renderer (never escaped)
        key: Optional identity key carried through every transform
    """

    kind: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: Any = None
    raw_body: Optional[str] = None
    key: Optional[str] = None

    # props is a dict, so nodes compare by value but are not hashable
    __hash__ = None

    @classmethod
    def script(cls, props=None, children=None, key=None, **attrs):
        """Build a script node; ``attrs`` are appended after ``props``."""
        merged = dict(props or {})
        merged.update(attrs)
        return cls(kind=SCRIPT_KIND, props=merged, children=children, key=key)

    def clone_with(self, overrides: Dict[str, Any]) -> "ScriptNode":
        """
        Return a copy with ``overrides`` merged into the properties.

        An override of ``None`` removes the property, existing properties keep
        their position and new ones are appended.
        """
        props = dict(self.props)
        for name, value in overrides.items():
            if value is None:
                props.pop(name, None)
            else:
                props[name] = value
        return replace(self, props=props)

    def get(self, name, default=None):
        return self.props.get(name, default)


def is_script_element(node) -> bool:
    """True for script nodes only."""
    return isinstance(node, ScriptNode) and node.kind == SCRIPT_KIND
