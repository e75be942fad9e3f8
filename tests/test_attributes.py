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
Tests for script_integrity/attributes.py
"""

from script_integrity.attributes import attributes_from_node, get_attribute_value
from script_integrity.nodes import ScriptNode


class TestAttributesFromNode:
    """Tests for attributes_from_node."""

    def test_non_script_node_gives_empty_list(self):
        node = ScriptNode(kind="div", props={"id": "x"})
        assert attributes_from_node(node) == []

    def test_none_gives_empty_list(self):
        assert attributes_from_node(None) == []

    def test_keeps_scalars_in_declaration_order(self):
        node = ScriptNode.script(
            {"src": "a.js", "async": True, "data-retries": 3, "data-ratio": 0.5}
        )
        assert attributes_from_node(node) == [
            ("src", "a.js"),
            ("async", True),
            ("data-retries", 3),
            ("data-ratio", 0.5),
        ]

    def test_drops_non_scalar_values(self):
        node = ScriptNode.script(
            {
                "src": "a.js",
                "onLoad": lambda: None,
                "style": {"display": "none"},
                "child": ScriptNode.script(),
                "nonce": None,
                "defer": False,
            }
        )
        assert attributes_from_node(node) == [("src", "a.js"), ("defer", False)]

    def test_children_are_not_attributes(self):
        node = ScriptNode.script({"id": "x"}, children="console.log(1)")
        assert attributes_from_node(node) == [("id", "x")]


class TestGetAttributeValue:
    """Tests for get_attribute_value."""

    def test_returns_first_match(self):
        attrs = [("async", True), ("async", False)]
        assert get_attribute_value("async", attrs) is True

    def test_returns_none_when_missing(self):
        assert get_attribute_value("defer", [("async", True)]) is None
