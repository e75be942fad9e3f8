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
Script integrity services.

Transforms applied to script nodes before they are embedded in a page:

- ``create_trusted_loading_proxy``: one inline loader carrying its own hash
  as id, used to load scripts whose own integrity is not known at build time
- ``with_hash_if_inline_script``: inline scripts get an ``integrity`` value
- ``script_with_patched_cross_origin``: reconciles the ``crossOrigin`` aliases
  on external scripts checked by integrity

All of them leave nodes they do not apply to unchanged.
"""

import logging
from typing import Iterable, List

from project.security.utils import SecurityLogger, SecurityValidator

from .attributes import AttributeList, attributes_from_node, get_attribute_value
from .exceptions import PlaceholderCollisionError
from .hashing import integrity_sha256
from .loader import create_hashable_script_loader
from .nodes import ScriptNode, is_script_element

logger = logging.getLogger(__name__)

# Stands in for the proxy id until the hash of the loader code is known
PROXY_PLACEHOLDER = "self-reference-proxy"

# Checked in this order, the first truthy value wins
CROSS_ORIGIN_ALIASES = ("crossOrigin", "data-crossorigin", "crossorigin")


def _check_placeholder_collisions(batch: List[AttributeList]) -> None:
    for attrs in batch:
        for name, value in attrs:
            for candidate in (name, value):
                if SecurityValidator.contains_marker(candidate, PROXY_PLACEHOLDER):
                    SecurityLogger.log_rejected_script(
                        reason="placeholder_collision",
                        attribute=name,
                        value=value,
                    )
                    raise PlaceholderCollisionError(name, PROXY_PLACEHOLDER)


def create_trusted_loading_proxy(nodes: Iterable) -> ScriptNode:
    """
    Build one inline script that loads ``nodes`` as non-parser-inserted scripts.

    The loader has to find itself in the DOM by id, and that id is its own hash,
    which can only be computed once the code exists. So the code is drafted with
    ``PROXY_PLACEHOLDER`` as id, the draft is hashed, and the placeholder is then
    replaced by that hash. The returned ``id`` is the hash of the draft, not of
    the final code.

    ``async``/``defer`` are set on the proxy only when every proxied script has
    them; otherwise the attribute is left out.

    Raises:
        PlaceholderCollisionError: an attribute contains ``PROXY_PLACEHOLDER``
    """
    batch = [attributes_from_node(node) for node in nodes]
    _check_placeholder_collisions(batch)

    draft = create_hashable_script_loader(batch, PROXY_PLACEHOLDER)
    proxy_id = integrity_sha256(draft)
    code = draft.replace(PROXY_PLACEHOLDER, proxy_id)

    load_async = all(get_attribute_value("async", attrs) for attrs in batch)
    load_defer = all(get_attribute_value("defer", attrs) for attrs in batch)

    props = {"id": proxy_id}
    if load_async:
        props["async"] = True
    if load_defer:
        props["defer"] = True

    logger.debug(f"Built trusted loading proxy {proxy_id} for {len(batch)} script(s)")
    return ScriptNode.script(props, children=code)


def with_hash_if_inline_script(node):
    """
    Give an inline script an ``integrity`` value computed from its code.

    A script counts as inline when its only child is a string. The code moves to
    the raw body so the renderer embeds it as is, ``src`` is dropped and every
    other attribute (and the key) is kept. Anything else is returned unchanged.
    """
    if not is_script_element(node) or not isinstance(node.children, str):
        return node

    inline_code = node.children
    props = dict(node.props)
    props.pop("src", None)
    props["integrity"] = integrity_sha256(inline_code)

    return ScriptNode(
        kind=node.kind,
        props=props,
        children=None,
        raw_body=inline_code,
        key=node.key,
    )


def script_with_patched_cross_origin(node):
    """
    Resolve ``crossOrigin`` for an external script that has an integrity value.

    Takes the first truthy value of ``crossOrigin``, ``data-crossorigin`` and
    ``crossorigin`` and always drops the two placeholder spellings. Scripts
    without both ``integrity`` and ``src`` are returned unchanged.
    """
    if not is_script_element(node) or not (node.get("integrity") and node.get("src")):
        return node

    cross_origin = next(
        (node.get(alias) for alias in CROSS_ORIGIN_ALIASES if node.get(alias)),
        None,
    )
    return node.clone_with(
        {
            "crossOrigin": cross_origin,
            "data-crossorigin": None,
            "crossorigin": None,
        }
    )
