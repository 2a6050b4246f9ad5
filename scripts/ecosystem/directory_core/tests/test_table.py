from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from directory_core.pagination import ELLIPSIS  # noqa: E402
from directory_core.table import ACTIONS, Action, Column, DataTable  # noqa: E402


def _records(count: int) -> list[dict]:
    return [{"id": i, "name": f"Row {i}", "score": i * 10} for i in range(1, count + 1)]


def _columns() -> list[Column]:
    return [
        Column("name", "Name"),
        Column("score", "Score", render=lambda r: f"{r['score']} pts"),
        Column(ACTIONS, "Actions"),
    ]


class DataTableStateTests(unittest.TestCase):
    def test_loading_hides_rows(self):
        table = DataTable("Rows", _columns(), _records(3), is_loading=True)
        self.assertEqual(table.state, "loading")
        self.assertEqual(table.rows(), [])

    def test_empty_and_populated(self):
        self.assertEqual(DataTable("Rows", _columns(), []).state, "empty")
        self.assertEqual(DataTable("Rows", _columns(), _records(1)).state, "populated")

    def test_rows_use_id_key_and_render_overrides(self):
        deleted = []
        table = DataTable("Rows", _columns(), _records(2), on_delete=deleted.append)
        rows = table.rows()
        self.assertEqual([row.key for row in rows], [1, 2])
        self.assertEqual(rows[0].cells, ["Row 1", "10 pts", [Action.DELETE]])
        self.assertEqual(table.headers(), ["Name", "Score", "Actions"])

    def test_actions_cell_lists_available_callbacks(self):
        table = DataTable("Rows", _columns(), _records(1))
        self.assertEqual(table.rows()[0].cells[2], [])
        table = DataTable("Rows", _columns(), _records(1), on_edit=lambda r: None, on_delete=lambda r: None)
        self.assertEqual(table.rows()[0].cells[2], [Action.EDIT, Action.DELETE])


class DataTableSearchTests(unittest.TestCase):
    def test_search_only_with_search_key(self):
        table = DataTable("Rows", _columns(), _records(5))
        table.set_search_query("row 2")
        self.assertEqual(len(table.filtered()), 5)

    def test_string_search_is_case_insensitive(self):
        table = DataTable("Rows", _columns(), _records(12), search_key="name")
        table.set_search_query("ROW 1")
        self.assertEqual([r["id"] for r in table.filtered()], [1, 10, 11, 12])

    def test_non_string_values_compare_as_text(self):
        table = DataTable("Rows", _columns(), _records(12), search_key="score")
        table.set_search_query("12")
        self.assertEqual([r["id"] for r in table.filtered()], [12])

    def test_missing_values_never_match(self):
        table = DataTable("Rows", _columns(), [{"id": 1, "name": None}], search_key="name")
        table.set_search_query("none")
        self.assertEqual(table.filtered(), [])
        self.assertEqual(table.state, "empty")

    def test_search_resets_page(self):
        table = DataTable("Rows", _columns(), _records(25), search_key="name")
        table.set_page(3)
        self.assertEqual(table.page, 3)
        table.set_search_query("row")
        self.assertEqual(table.page, 1)


    def test_filtering_runs_once_per_render(self):
        table = DataTable("Rows", _columns(), _records(25), search_key="name")
        table.set_search_query("row 1")
        table.rows()
        table.window()
        table.bounds()
        self.assertEqual(table.state, "populated")
        self.assertEqual(table.filter_runs, 1)
        table.set_page(2)
        self.assertEqual(table.filter_runs, 1)
        table.set_search_query("row 2")
        self.assertEqual([r["id"] for r in table.filtered()], [2, 20, 21, 22, 23, 24, 25])
        self.assertEqual(table.filter_runs, 2)
        table.set_data(_records(3))
        self.assertEqual([r["id"] for r in table.filtered()], [2])
        self.assertEqual(table.filter_runs, 3)


class DataTablePaginationTests(unittest.TestCase):
    def test_fixed_page_size_of_ten(self):
        table = DataTable("Rows", _columns(), _records(23))
        self.assertEqual(table.total_pages, 3)
        table.set_page(3)
        self.assertEqual([row.key for row in table.rows()], [21, 22, 23])

    def test_navigation_is_clamped(self):
        table = DataTable("Rows", _columns(), _records(23))
        table.previous_page()
        self.assertEqual(table.page, 1)
        table.set_page(99)
        self.assertEqual(table.page, 3)
        table.next_page()
        self.assertEqual(table.page, 3)
        self.assertEqual(table.bounds(), (True, False))

    def test_window(self):
        table = DataTable("Rows", _columns(), _records(100))
        table.set_page(5)
        self.assertEqual(table.window(), [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10])
        self.assertEqual(DataTable("Rows", _columns(), _records(3)).window(), [])

    def test_refresh_clamps_page(self):
        table = DataTable("Rows", _columns(), _records(23))
        table.set_page(3)
        table.set_data(_records(5))
        self.assertEqual(table.page, 1)


class DataTableActionTests(unittest.TestCase):
    def test_delete_requires_confirmation(self):
        deleted = []
        records = _records(2)
        table = DataTable("Rows", _columns(), records, on_delete=deleted.append)
        confirmation = table.request_delete(records[0])
        self.assertEqual(deleted, [])
        self.assertEqual(confirmation.title, "Are you absolutely sure?")
        confirmation.confirm()
        confirmation.confirm()
        self.assertEqual(deleted, [records[0]])

    def test_cancelled_delete_is_a_no_op(self):
        deleted = []
        records = _records(2)
        table = DataTable("Rows", _columns(), records, on_delete=deleted.append)
        confirmation = table.request_delete(records[1])
        confirmation.cancel()
        confirmation.confirm()
        self.assertEqual(deleted, [])
        self.assertFalse(confirmation.confirmed)
        self.assertEqual(len(table.data), 2)

    def test_no_delete_without_callback(self):
        table = DataTable("Rows", _columns(), _records(1))
        self.assertIsNone(table.request_delete(table.data[0]))

    def test_add_and_edit(self):
        added = []
        edited = []
        table = DataTable("Rows", _columns(), _records(1), on_add=lambda: added.append(True), on_edit=edited.append)
        self.assertTrue(table.add())
        self.assertTrue(table.edit(table.data[0]))
        self.assertEqual(added, [True])
        self.assertEqual(edited, [table.data[0]])
        self.assertFalse(DataTable("Rows", _columns()).add())

    def test_find_accepts_string_keys(self):
        table = DataTable("Rows", _columns(), _records(3))
        self.assertEqual(table.find("2")["name"], "Row 2")
        self.assertIsNone(table.find("9"))


if __name__ == "__main__":
    unittest.main()
