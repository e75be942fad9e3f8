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
Django management command to compute CSP integrity values for scripts.

Prints the sha256 integrity value of each given file, or renders a trusted
loading proxy for a list of external script URLs.

Usage:
    python manage.py script_hash static/js/app.js static/js/menu.js
    python manage.py script_hash static/js/app.js --csp
    python manage.py script_hash --loader https://cdn.example.com/a.js https://cdn.example.com/b.js --async
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from script_integrity.exceptions import ScriptIntegrityError
from script_integrity.hashing import csp_hash_source, integrity_sha256
from script_integrity.nodes import ScriptNode
from script_integrity.rendering import render_node
from script_integrity.services import (
    create_trusted_loading_proxy,
    with_hash_if_inline_script,
)


class Command(BaseCommand):
    help = "Compute CSP integrity values for script files or build a trusted script loader"

    def add_arguments(self, parser):
        parser.add_argument(
            "files",
            nargs="*",
            help="Script files to hash",
        )
        parser.add_argument(
            "--loader",
            nargs="+",
            metavar="SRC",
            help="Render a trusted loading proxy for these script URLs",
        )
        parser.add_argument(
            "--async",
            dest="load_async",
            action="store_true",
            help="Mark every proxied script as async",
        )
        parser.add_argument(
            "--defer",
            action="store_true",
            help="Mark every proxied script as defer",
        )
        parser.add_argument(
            "--csp",
            action="store_true",
            help="Print hashes as script-src source expressions",
        )

    def handle(self, *args, **options):
        if not options["files"] and not options["loader"]:
            raise CommandError("Give at least one file or --loader SRC")

        for file_name in options["files"]:
            integrity = self.hash_file(Path(file_name))
            self.stdout.write(f"{self.format_hash(integrity, options['csp'])}  {file_name}")

        if options["loader"]:
            self.render_loader(options)

    def hash_file(self, path):
        """Integrity value of a file's text content."""
        try:
            code = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f"Could not read {path}: {e}")
        return integrity_sha256(code)

    def format_hash(self, integrity, as_csp_source):
        return csp_hash_source(integrity) if as_csp_source else integrity

    def render_loader(self, options):
        """Write the proxy markup and the hashes a policy has to allow for it."""
        scripts = []
        for src in options["loader"]:
            props = {"src": src}
            if options["load_async"]:
                props["async"] = True
            if options["defer"]:
                props["defer"] = True
            scripts.append(ScriptNode.script(props))

        try:
            proxy = with_hash_if_inline_script(create_trusted_loading_proxy(scripts))
        except ScriptIntegrityError as e:
            raise CommandError(str(e))

        self.stdout.write(render_node(proxy))
        self.stdout.write(self.style.SUCCESS(
            f"id: {self.format_hash(proxy.get('id'), options['csp'])}"
        ))
        self.stdout.write(self.style.SUCCESS(
            f"integrity: {self.format_hash(proxy.get('integrity'), options['csp'])}"
        ))
