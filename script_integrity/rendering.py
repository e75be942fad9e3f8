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
HTML rendering of element nodes.

Mirrors what a JSX renderer does with a script element: React-style property
names become HTML attribute names, ``True`` becomes a bare attribute, ``False``
and ``None`` are left out, and the raw body is emitted without escaping.
"""

from django.utils.html import escape, format_html
from django.utils.safestring import SafeString, mark_safe

from .attributes import SCALAR_TYPES
from .nodes import ScriptNode

HTML_ATTRIBUTE_NAMES = {
    "crossOrigin": "crossorigin",
    "noModule": "nomodule",
    "referrerPolicy": "referrerpolicy",
    "fetchPriority": "fetchpriority",
}


def render_attributes(props) -> SafeString:
    """Render a property bag as an HTML attribute string with a leading space."""
    parts = []
    for name, value in props.items():
        if value is None or value is False or not isinstance(value, SCALAR_TYPES):
            continue
        html_name = HTML_ATTRIBUTE_NAMES.get(name, name)
        if value is True:
            parts.append(format_html(" {}", html_name))
        else:
            parts.append(format_html(' {}="{}"', html_name, value))
    return mark_safe("".join(parts))


def _render_children(children) -> SafeString:
    if children is None:
        return mark_safe("")
    if isinstance(children, ScriptNode):
        return render_node(children)
    if isinstance(children, (list, tuple)):
        return mark_safe("".join(_render_children(child) for child in children))
    return escape(children)


def render_node(node: ScriptNode) -> SafeString:
    """Render a node (and its children) to markup."""
    if node.raw_body is not None:
        body = mark_safe(node.raw_body)
    else:
        body = _render_children(node.children)
    return format_html(
        "<{}{}>{}</{}>", node.kind, render_attributes(node.props), body, node.kind
    )