from __future__ import annotations

import unittest

from dirtree.paths import TreePath
from dirtree.tree_model import DirEntry, EntryKind, Statistics, observe_entry


def _entry(kind: EntryKind, size: int | None = None, blocks: int | None = None) -> DirEntry:
    return DirEntry(name="x", path=TreePath.parse("x"), kind=kind, size=size, blocks=blocks)


class StatisticsTests(unittest.TestCase):
    def test_observe_entry_increments_exactly_one_counter(self) -> None:
        cases = {
            EntryKind.DIRECTORY: "dirs",
            EntryKind.FILE: "files",
            EntryKind.SYMLINK: "links",
            EntryKind.FIFO: "fifos",
            EntryKind.SOCKET: "socks",
            EntryKind.OTHER: "others",
            EntryKind.UNREADABLE: "others",
        }
        for kind, field_name in cases.items():
            with self.subTest(kind=kind):
                stats = Statistics()
                observe_entry(stats, _entry(kind, size=100, blocks=8))
                self.assertEqual(getattr(stats, field_name), 1)
                self.assertEqual(stats.entries, 1)

    def test_only_regular_files_add_size_and_blocks(self) -> None:
        stats = Statistics()
        observe_entry(stats, _entry(EntryKind.FILE, size=10, blocks=8))
        observe_entry(stats, _entry(EntryKind.DIRECTORY, size=4096, blocks=8))
        observe_entry(stats, _entry(EntryKind.SYMLINK, size=12, blocks=0))

        self.assertEqual((stats.size, stats.blocks), (10, 8))

    def test_merge_adds_every_field(self) -> None:
        total = Statistics(dirs=1, files=2, size=30, blocks=8)
        total.merge(Statistics(dirs=2, files=1, links=1, fifos=1, socks=1, others=1, size=5, blocks=8))

        self.assertEqual(
            total,
            Statistics(dirs=3, files=3, links=1, fifos=1, socks=1, others=1, size=35, blocks=16),
        )

    def test_copy_is_detached(self) -> None:
        stats = Statistics(files=1)
        snapshot = stats.copy()
        stats.add_file(10, 8)

        self.assertEqual(snapshot, Statistics(files=1))
        self.assertEqual(stats.files, 2)


if __name__ == "__main__":
    unittest.main()
