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

from django.shortcuts import render

from .nodes import ScriptNode

# Third-party scripts whose final integrity is not known when the page is built
DEMO_LOADED_SCRIPTS = [
    ScriptNode.script({"src": "https://cdn.example.com/analytics.js", "async": True}),
    ScriptNode.script(
        {
            "src": "https://cdn.example.com/widget.js",
            "async": True,
            "data-widget": "feedback",
        }
    ),
]


def welcome(request):
    """Demo page rendering an inline, an external and a proxied script."""
    context = {
        "loaded_scripts": DEMO_LOADED_SCRIPTS,
        "external_src": "https://cdn.example.com/vendor.js",
        "external_integrity": "sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU=",
    }
    return render(request, "script_integrity/welcome.html", context)
