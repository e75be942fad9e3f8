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
Tests for script_integrity/templatetags/script_integrity_tags.py
"""

import re

import pytest
from django.template import Context, Template, TemplateSyntaxError
from django.test import RequestFactory, override_settings

from script_integrity.collector import get_script_hashes
from script_integrity.hashing import integrity_sha256
from script_integrity.nodes import ScriptNode
from script_integrity.services import create_trusted_loading_proxy
from script_integrity.templatetags.script_integrity_tags import sha256_integrity


def render(template_string, context=None):
    template = Template("{% load script_integrity_tags %}" + template_string)
    return template.render(Context(context or {}))


@pytest.fixture
def page_request():
    return RequestFactory().get("/page/")


class TestInlineScriptTag:
    """Tests for {% inline_script %}."""

    def test_renders_integrity_and_raw_code(self):
        html = render("{% inline_script %}console.log('1' < 2){% endinline_script %}")
        expected = integrity_sha256("console.log('1' < 2)")
        assert html == f"<script integrity=\"{expected}\">console.log('1' < 2)</script>"

    def test_keeps_attributes_and_drops_src(self):
        html = render('{% inline_script type="module" src="a.js" %}x(){% endinline_script %}')
        assert 'type="module"' in html
        assert "src=" not in html

    def test_body_variables_are_hashed_as_rendered(self):
        html = render("{% inline_script %}var v = {{ n }};{% endinline_script %}", {"n": 7})
        assert integrity_sha256("var v = 7;") in html

    def test_registers_hash_on_request(self, page_request):
        render("{% inline_script %}x(){% endinline_script %}", {"request": page_request})
        assert get_script_hashes(page_request) == [integrity_sha256("x()")]

    def test_rejects_positional_arguments(self):
        with pytest.raises(TemplateSyntaxError):
            Template("{% load script_integrity_tags %}{% inline_script module %}x(){% endinline_script %}")

    def test_lone_surrogate_in_body_renders(self):
        html = render("{% inline_script %}var v = '{{ v }}';{% endinline_script %}", {"v": "\ud800"})
        assert integrity_sha256("var v = '\ufffd';") in html

    @override_settings(SCRIPT_INTEGRITY_LOG_TRANSFORMS=False)
    def test_no_transform_log_by_default(self, caplog):
        with caplog.at_level("DEBUG", logger="script_integrity"):
            render("{% inline_script %}x(){% endinline_script %}")
        assert "inline_script" not in caplog.text

    @override_settings(SCRIPT_INTEGRITY_LOG_TRANSFORMS=True)
    def test_logs_transform_when_enabled(self, caplog):
        with caplog.at_level("DEBUG", logger="script_integrity"):
            render("{% inline_script %}x(){% endinline_script %}")
        assert "inline_script" in caplog.text


class TestExternalScriptTag:
    """Tests for {% external_script %}."""

    def test_promotes_data_crossorigin(self):
        html = render(
            '{% external_script src="https://x/a.js" integrity="sha256-abc" data-crossorigin="anonymous" %}'
        )
        assert html == '<script src="https://x/a.js" integrity="sha256-abc" crossorigin="anonymous"></script>'

    def test_without_integrity_keeps_aliases(self):
        html = render('{% external_script src="a.js" data-crossorigin="anonymous" %}')
        assert 'data-crossorigin="anonymous"' in html

    def test_boolean_literal(self):
        html = render('{% external_script src="a.js" async=True %}')
        assert html == '<script src="a.js" async></script>'

    def test_registers_integrity(self, page_request):
        render(
            '{% external_script src="a.js" integrity="sha256-abc" %}',
            {"request": page_request},
        )
        assert get_script_hashes(page_request) == ["sha256-abc"]


class TestTrustedScriptLoaderTag:
    """Tests for {% trusted_script_loader %}."""

    def test_renders_proxy_with_its_id(self):
        scripts = [ScriptNode.script({"src": "a.js", "async": True})]
        proxy = create_trusted_loading_proxy(scripts)
        html = render("{% trusted_script_loader scripts %}", {"scripts": scripts})
        assert f'id="{proxy.get("id")}"' in html
        assert " async" in html
        assert f"integrity=\"{integrity_sha256(proxy.children)}\"" in html
        assert proxy.children in html

    def test_accepts_dicts_and_strings(self):
        html = render(
            "{% trusted_script_loader scripts %}",
            {"scripts": [{"src": "a.js", "data-x": "1"}, "b.js"]},
        )
        assert "s0.src='a.js';" in html
        assert "s0.setAttribute('data-x', '1');" in html
        assert "s1.src='b.js';" in html

    def test_single_src_string_is_one_script(self):
        html = render("{% trusted_script_loader scripts %}", {"scripts": "a.js"})
        assert "s0.src='a.js';" in html
        assert "var s = [s0];" in html

    def test_single_dict_is_one_script(self):
        html = render("{% trusted_script_loader scripts %}", {"scripts": {"src": "a.js", "defer": True}})
        assert "s0.src='a.js';" in html
        assert "var s = [s0];" in html
        assert " defer" in html

    def test_single_node_is_one_script(self):
        node = ScriptNode.script({"src": "a.js"})
        html = render("{% trusted_script_loader scripts %}", {"scripts": node})
        assert create_trusted_loading_proxy([node]).children in html

    def test_string_literal_argument(self):
        html = render('{% trusted_script_loader "a.js" %}')
        assert "s0.src='a.js';" in html
        assert "var s = [s0];" in html

    def test_empty_list_renders_nothing(self):
        assert render("{% trusted_script_loader scripts %}", {"scripts": []}) == ""

    def test_missing_variable_renders_nothing(self):
        assert render("{% trusted_script_loader scripts %}") == ""

    def test_registers_id_and_body_hash(self, page_request):
        scripts = [{"src": "a.js"}]
        html = render("{% trusted_script_loader scripts %}", {"scripts": scripts, "request": page_request})
        proxy_id = re.search(r'id="([^"]+)"', html).group(1)
        integrity = re.search(r'integrity="([^"]+)"', html).group(1)
        assert get_script_hashes(page_request) == [proxy_id, integrity]

    def test_requires_one_argument(self):
        with pytest.raises(TemplateSyntaxError):
            Template("{% load script_integrity_tags %}{% trusted_script_loader %}")


class TestFiltersAndNonce:
    """Tests for sha256_integrity and csp_nonce."""

    def test_sha256_integrity_filter(self):
        assert sha256_integrity("x()") == integrity_sha256("x()")

    def test_csp_nonce_from_request(self, page_request):
        page_request.csp_nonce = "abc123"
        assert render("{% csp_nonce %}", {"request": page_request}) == "abc123"

    def test_csp_nonce_without_request(self):
        assert render("{% csp_nonce %}") == ""
