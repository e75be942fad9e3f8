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

from typing import List, Optional, Tuple, Union

from .nodes import is_script_element

Scalar = Union[str, bool, int, float]
AttributeList = List[Tuple[str, Scalar]]

# Only these can be written into generated loader code
SCALAR_TYPES = (str, bool, int, float)


def attributes_from_node(node) -> AttributeList:
    """
    Read a script node's properties into an ordered list of (name, value) pairs.

    Non-script nodes give an empty list. Properties holding anything other than
    a string, boolean or number (callbacks, nested dicts, child nodes) are
    dropped.
    """
    if not is_script_element(node):
        return []
    return [
        (name, value)
        for name, value in node.props.items()
        if isinstance(value, SCALAR_TYPES)
    ]


def get_attribute_value(name: str, attrs: AttributeList) -> Optional[Scalar]:
    """Value of the first pair called ``name``, or None."""
    for attr, value in attrs:
        if attr == name:
            return value
    return None
