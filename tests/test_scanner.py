import tempfile
import unittest
from pathlib import Path

from binstubs.scanner import match_line, scan_file, scan_lines


TOOLS_GO = """//go:build tools

package main

import (
\t_ "github.com/brasic/binstubs"
\t_ "github.com/path/to/dep/cmd/something" // binstub:ignore
    _ "github.com/golang-migrate/migrate/v4/cmd/migrate" // binstub:args="-tags postgres"
\t// _ "github.com/commented/out"
)
"""


class TestMatchLine(unittest.TestCase):
    def test_indented_import_without_comment(self) -> None:
        decl = match_line('\t_ "github.com/brasic/binstubs"\n', 6)
        self.assertIsNotNone(decl)
        assert decl is not None
        self.assertEqual("github.com/brasic/binstubs", decl.module_path)
        self.assertEqual("", decl.trailing_comment)
        self.assertEqual(6, decl.line_no)

    def test_trailing_comment_is_captured_without_marker(self) -> None:
        decl = match_line('    _ "github.com/x/y/cmd/z" // binstub:args="-tags foo"  \r\n')
        assert decl is not None
        self.assertEqual("github.com/x/y/cmd/z", decl.module_path)
        self.assertEqual('binstub:args="-tags foo"', decl.trailing_comment)

    def test_unindented_and_single_line_import_forms(self) -> None:
        self.assertEqual("a/b", match_line('_ "a/b"').module_path)
        self.assertEqual("a/c", match_line('import _ "a/c"').module_path)

    def test_non_import_lines_are_ignored(self) -> None:
        for line in [
            "package main",
            "import (",
            ")",
            "",
            '\t"fmt"',
            '\tfoo_ "a/b"',
            '\t_ ""',
            "// just a comment",
        ]:
            self.assertIsNone(match_line(line), line)

    def test_trailing_text_requires_comment_marker(self) -> None:
        self.assertIsNone(match_line('\t_ "a/b" junk binstub:ignore'))
        decl = match_line('\t_ "a/b"//binstub:ignore')
        assert decl is not None
        self.assertEqual("binstub:ignore", decl.trailing_comment)


class TestScan(unittest.TestCase):
    def test_scan_lines_yields_in_file_order(self) -> None:
        decls = list(scan_lines(TOOLS_GO.splitlines(keepends=True)))
        self.assertEqual(
            [
                "github.com/brasic/binstubs",
                "github.com/path/to/dep/cmd/something",
                "github.com/golang-migrate/migrate/v4/cmd/migrate",
            ],
            [d.module_path for d in decls],
        )
        self.assertEqual([6, 7, 8], [d.line_no for d in decls])
        self.assertEqual("binstub:ignore", decls[1].trailing_comment)

    def test_commented_out_import_is_not_matched(self) -> None:
        decls = list(scan_lines(['\t// _ "github.com/commented/out"']))
        self.assertEqual([], decls)

    def test_scan_lines_is_lazy(self) -> None:
        seen = []

        def lines():
            for line in ['\t_ "a/one"', '\t_ "a/two"']:
                seen.append(line)
                yield line

        it = scan_lines(lines())
        self.assertEqual([], seen)
        self.assertEqual("a/one", next(it).module_path)
        self.assertEqual(1, len(seen))

    def test_scan_file_reads_from_disk(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "tools.go"
            p.write_text(TOOLS_GO, encoding="utf-8")
            with scan_file(p) as decls:
                self.assertEqual(3, len(list(decls)))

    def test_scan_file_closes_file_on_exit(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "tools.go"
            p.write_text(TOOLS_GO, encoding="utf-8")
            with self.assertRaises(RuntimeError):
                with scan_file(p) as decls:
                    raise RuntimeError("stop before iterating")
            with self.assertRaises(ValueError):
                # reading from a closed file
                next(decls)

    def test_scan_file_tolerates_invalid_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "tools.go"
            p.write_bytes(b'\t_ "a/first"\n// caf\xe9\n\t_ "a/second"\n')
            with scan_file(p) as decls:
                self.assertEqual(["a/first", "a/second"], [d.module_path for d in decls])

    def test_scan_file_missing_raises_on_enter(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(OSError):
                with scan_file(Path(td) / "tools.go"):
                    pass


if __name__ == "__main__":
    unittest.main()
