"""Tests for history windows: rev-list parsing, parent maps, pagination, validation."""

import unittest

from commitgraph.errors import HistoryParseError, InvalidHistoryWindowError
from commitgraph.history import commits_from_parent_map, paginate, parse_rev_list, validate_window
from commitgraph.layout import layout
from commitgraph.objects import Commit

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40
HASH_D = "d" * 40

REV_LIST = f"""{HASH_A} {HASH_B} {HASH_C}
{HASH_C} {HASH_D}

{HASH_B} {HASH_D}
{HASH_D}
"""


class TestParseRevList(unittest.TestCase):
    def test_parses_parents_in_order(self) -> None:
        commits = parse_rev_list(REV_LIST)
        self.assertEqual([c.identifier for c in commits], [HASH_A, HASH_C, HASH_B, HASH_D])
        self.assertEqual(commits[0].parents, (HASH_B, HASH_C))
        self.assertTrue(commits[0].is_merge)
        self.assertEqual(commits[0].first_parent, HASH_B)
        self.assertEqual(commits[0].other_parents, (HASH_C,))
        self.assertTrue(commits[3].is_root)
        self.assertIsNone(commits[3].first_parent)

    def test_lowercases_and_accepts_short_names(self) -> None:
        commits = parse_rev_list("ABCDEF1 1234567\n")
        self.assertEqual(commits, [Commit("abcdef1", ("1234567",))])

    def test_empty_text(self) -> None:
        self.assertEqual(parse_rev_list(""), [])
        self.assertEqual(parse_rev_list("\n  \n"), [])

    def test_invalid_token_reports_line(self) -> None:
        with self.assertRaises(HistoryParseError) as ctx:
            parse_rev_list(f"{HASH_A} {HASH_B}\n{HASH_B} not-a-hash\n")
        self.assertIn("line 2", str(ctx.exception))

    def test_too_short_name_rejected(self) -> None:
        with self.assertRaises(HistoryParseError):
            parse_rev_list("abc\n")


class TestParentMap(unittest.TestCase):
    def test_builds_commits_in_identifier_order(self) -> None:
        parents = {"x": ["y"], "y": [], "z": ["x", "y"]}
        commits = commits_from_parent_map(["z", "x", "y"], parents)
        self.assertEqual([c.identifier for c in commits], ["z", "x", "y"])
        self.assertEqual(commits[0].parents, ("x", "y"))
        self.assertEqual(commits[2].parents, ())

    def test_missing_entry_raises(self) -> None:
        with self.assertRaises(HistoryParseError):
            commits_from_parent_map(["x", "q"], {"x": []})


class TestPaginate(unittest.TestCase):
    def setUp(self) -> None:
        self.commits = [Commit(f"c{i}", (f"c{i + 1}",)) for i in range(10)]

    def test_first_page_is_head(self) -> None:
        window = paginate(self.commits, offset=0, limit=4)
        self.assertTrue(window.is_head)
        self.assertEqual([c.identifier for c in window.commits], ["c0", "c1", "c2", "c3"])

    def test_later_page_is_not_head(self) -> None:
        window = paginate(self.commits, offset=4, limit=4)
        self.assertFalse(window.is_head)
        self.assertEqual(window.offset, 4)
        self.assertEqual([c.identifier for c in window.commits], ["c4", "c5", "c6", "c7"])

    def test_zero_limit_means_rest(self) -> None:
        window = paginate(self.commits, offset=8)
        self.assertEqual(len(window.commits), 2)

    def test_offset_past_end(self) -> None:
        window = paginate(self.commits, offset=20, limit=5)
        self.assertEqual(window.commits, ())

    def test_negative_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            paginate(self.commits, offset=-1)
        with self.assertRaises(ValueError):
            paginate(self.commits, limit=-1)

    def test_later_page_draws_threads_from_above(self) -> None:
        # Branch tip "t" has its child on the first page, so on the second page
        # it starts below a thread reaching past the top of the window.
        history = [
            Commit("m", ("a", "t")),
            Commit("a", ("b",)),
            Commit("b", ("c",)),
            Commit("t", ("c",)),
            Commit("c", ()),
        ]
        window = paginate(history, offset=2, limit=3)
        graph = layout(window.commits, is_head=window.is_head)
        self.assertEqual([r.line for r in graph], ["o|", "|o", "o "])
        self.assertEqual(graph[2].joins, (1,))


class TestValidateWindow(unittest.TestCase):
    def test_valid_window_passes(self) -> None:
        validate_window([Commit("a", ("b",)), Commit("b", ())])

    def test_duplicate_identifier(self) -> None:
        with self.assertRaises(InvalidHistoryWindowError) as ctx:
            validate_window([Commit("a", ()), Commit("a", ())])
        self.assertIn("invalid history window", str(ctx.exception))

    def test_self_parent(self) -> None:
        with self.assertRaises(InvalidHistoryWindowError):
            validate_window([Commit("a", ("b", "a"))])

    def test_empty_parent_identifier(self) -> None:
        with self.assertRaises(InvalidHistoryWindowError) as ctx:
            validate_window([Commit("m", ("a", ""))])
        self.assertIn("empty parent", str(ctx.exception))

    def test_empty_identifier(self) -> None:
        with self.assertRaises(InvalidHistoryWindowError):
            validate_window([Commit("", ())])


if __name__ == "__main__":
    unittest.main()
