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

import logging
import re

from django import template
from django.conf import settings
from django.template import TemplateSyntaxError

from script_integrity.collector import register_script_hash
from script_integrity.hashing import integrity_sha256
from script_integrity.nodes import ScriptNode
from script_integrity.rendering import render_node
from script_integrity.services import (
    create_trusted_loading_proxy,
    script_with_patched_cross_origin,
    with_hash_if_inline_script,
)

logger = logging.getLogger(__name__)

register = template.Library()

# name=value, names may contain dashes (data-crossorigin) and colons
ATTRIBUTE_ARGUMENT = re.compile(r"^([\w:-]+)=(.+)$")


def _log_transform(tag_name, node):
    if getattr(settings, "SCRIPT_INTEGRITY_LOG_TRANSFORMS", False):
        logger.debug(f"{tag_name}: rendered script with attributes {list(node.props)}")


def _parse_attributes(parser, bits, tag_name):
    attributes = {}
    for bit in bits:
        match = ATTRIBUTE_ARGUMENT.match(bit)
        if not match:
            raise TemplateSyntaxError(
                f"'{tag_name}' expects name=value arguments, got '{bit}'"
            )
        name, value = match.groups()
        attributes[name] = parser.compile_filter(value)
    return attributes


def _resolve_attributes(attributes, context):
    return {name: value.resolve(context) for name, value in attributes.items()}


class InlineScriptTagNode(template.Node):
    def __init__(self, attributes, nodelist):
        self.attributes = attributes
        self.nodelist = nodelist

    def render(self, context):
        code = str(self.nodelist.render(context))
        node = ScriptNode.script(_resolve_attributes(self.attributes, context), children=code)
        hashed = with_hash_if_inline_script(node)
        register_script_hash(context.get("request"), hashed.get("integrity"))
        _log_transform("inline_script", hashed)
        return render_node(hashed)


class ExternalScriptTagNode(template.Node):
    def __init__(self, attributes):
        self.attributes = attributes

    def render(self, context):
        node = ScriptNode.script(_resolve_attributes(self.attributes, context))
        patched = script_with_patched_cross_origin(node)
        register_script_hash(context.get("request"), patched.get("integrity"))
        _log_transform("external_script", patched)
        return render_node(patched)


class TrustedScriptLoaderTagNode(template.Node):
    def __init__(self, scripts):
        self.scripts = scripts

    def render(self, context):
        scripts = [_as_script_node(item) for item in _as_script_list(self.scripts.resolve(context))]
        if not scripts:
            return ""

        proxy = create_trusted_loading_proxy(scripts)
        # The browser checks the hash of the body it actually receives
        hashed = with_hash_if_inline_script(proxy)

        request = context.get("request")
        register_script_hash(request, hashed.get("id"))
        register_script_hash(request, hashed.get("integrity"))
        _log_transform("trusted_script_loader", hashed)
        return render_node(hashed)


def _as_script_list(value):
    # A single script, attribute dict or src string is a batch of one
    if not value:
        return []
    if isinstance(value, (ScriptNode, dict, str)):
        return [value]
    return value


def _as_script_node(item):
    if isinstance(item, ScriptNode):
        return item
    if isinstance(item, dict):
        return ScriptNode.script(item)
    if isinstance(item, str):
        return ScriptNode.script(src=item)
    return item


@register.tag
def inline_script(parser, token):
    """
    Render an inline script with its sha256 integrity value.

    Usage:
        {% inline_script type="module" %}console.log(1){% endinline_script %}
    """
    bits = token.split_contents()
    attributes = _parse_attributes(parser, bits[1:], bits[0])
    nodelist = parser.parse(("endinline_script",))
    parser.delete_first_token()
    return InlineScriptTagNode(attributes, nodelist)


@register.tag
def external_script(parser, token):
    """
    Render an external script, resolving its crossorigin spelling.

    Usage:
        {% external_script src=url integrity=hash data-crossorigin="anonymous" %}
    """
    bits = token.split_contents()
    return ExternalScriptTagNode(_parse_attributes(parser, bits[1:], bits[0]))


@register.tag
def trusted_script_loader(parser, token):
    """
    Render one self-identifying inline loader for a list of scripts.

    Items may be script nodes, attribute dicts or plain src strings; a single
    item is loaded as a list of one.

    Usage:
        {% trusted_script_loader scripts %}
    """
    bits = token.split_contents()
    if len(bits) != 2:
        raise TemplateSyntaxError(f"'{bits[0]}' takes exactly one argument")
    return TrustedScriptLoaderTagNode(parser.compile_filter(bits[1]))


@register.filter
def sha256_integrity(value):
    """
    Integrity value of a piece of script source.
    Example: {{ code|sha256_integrity }} -> 'sha256-...'
    """
    return integrity_sha256(str(value))


@register.simple_tag(takes_context=True)
def csp_nonce(context):
    """Return the request's CSP nonce value if available, else empty string."""
    request = context.get("request")
    return getattr(request, "csp_nonce", "") if request else ""
