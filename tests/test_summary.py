from __future__ import annotations

import unittest

from dirtree.summary import format_grand_total, format_root_header, format_root_summary
from dirtree.tree_model import Statistics


class SummaryFormattingTests(unittest.TestCase):
    def test_root_summary_block(self) -> None:
        stats = Statistics(dirs=1, files=2, size=8, blocks=16)

        self.assertEqual(
            format_root_summary(stats),
            "  # of files:        2\n"
            "  # of directories:  1\n"
            "  # of links:        0\n"
            "  # of pipes:        0\n"
            "  # of sockets:      0\n"
            "  total file size:   8 bytes\n"
            "  total blocks:      16",
        )

    def test_root_summary_reports_others_only_when_present(self) -> None:
        self.assertNotIn("others", format_root_summary(Statistics()))
        self.assertIn("  # of others:       3", format_root_summary(Statistics(others=3)))

    def test_root_header_starts_with_blank_line(self) -> None:
        self.assertEqual(format_root_header("src"), "\nDirectory: src")

    def test_grand_total_hides_size_unless_verbose(self) -> None:
        total = Statistics(dirs=4, files=10, links=1, size=1000, blocks=64)

        quiet = format_grand_total(total, 3, verbose=False)
        loud = format_grand_total(total, 3, verbose=True)

        self.assertEqual(
            quiet.splitlines(),
            [
                "Analyzed 3 directories:",
                "  total # of files:                      10",
                "  total # of directories:                 4",
                "  total # of links:                       1",
                "  total # of pipes:                       0",
                "  total # of sockets:                     0",
            ],
        )
        self.assertEqual(
            loud.splitlines()[-2:],
            [
                "  total file size:                     1000",
                "  total # of blocks:                     64",
            ],
        )


if __name__ == "__main__":
    unittest.main()
