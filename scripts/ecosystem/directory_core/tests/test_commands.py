from __future__ import annotations

import json
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from directory_core.admin import EntityStore, build_admin_table  # noqa: E402
from directory_core.app import main  # noqa: E402
from directory_core.commands import HANDLED, QUIT, UNKNOWN, apply_admin_command, apply_listing_command  # noqa: E402
from directory_core.controller import ListingController  # noqa: E402
from directory_core.models import ALL, Entity, SortOrder  # noqa: E402


def _entities(count: int = 20) -> list[Entity]:
    return [
        Entity(id=f"acc-{i}", name=f"Hub {i}", city="Oran" if i % 2 else "Algiers", founded_year=2000 + i)
        for i in range(count)
    ]


class ListingCommandTests(unittest.TestCase):
    def test_search_filter_sort_and_paging(self):
        controller = ListingController(_entities())
        self.assertEqual(apply_listing_command(controller, "n"), HANDLED)
        self.assertEqual(controller.current_page, 2)
        apply_listing_command(controller, "/Hub 1")
        self.assertEqual(controller.query.search_text, "Hub 1")
        self.assertEqual(controller.current_page, 1)
        apply_listing_command(controller, "f Oran")
        self.assertEqual(controller.query.categorical_filter, "Oran")
        apply_listing_command(controller, "s asc")
        self.assertEqual(controller.query.sort_order, SortOrder.ASC)
        apply_listing_command(controller, "c")
        self.assertEqual(controller.query.categorical_filter, ALL)
        self.assertEqual(controller.query.search_text, "")
        apply_listing_command(controller, "g 3")
        self.assertEqual(controller.current_page, 3)
        apply_listing_command(controller, "p")
        self.assertEqual(controller.current_page, 2)

    def test_unknown_and_quit(self):
        controller = ListingController(_entities())
        self.assertEqual(apply_listing_command(controller, "s sideways"), UNKNOWN)
        self.assertEqual(apply_listing_command(controller, "g x"), UNKNOWN)
        self.assertEqual(apply_listing_command(controller, "zzz"), UNKNOWN)
        self.assertEqual(apply_listing_command(controller, "q"), QUIT)


class AdminCommandTests(unittest.TestCase):
    def test_delete_asks_before_deleting(self):
        store = EntityStore(_entities(3))
        table = build_admin_table(store, "Manage")
        prompts = []

        def decline(title: str, body: str) -> bool:
            prompts.append(title)
            return False

        self.assertEqual(apply_admin_command(table, "d acc-1", decline), HANDLED)
        self.assertEqual(prompts, ["Are you absolutely sure?"])
        self.assertEqual(len(store.snapshot()), 3)

        apply_admin_command(table, "d acc-1", lambda title, body: True)
        self.assertEqual([e.id for e in store.snapshot()], ["acc-0", "acc-2"])
        self.assertEqual(len(table.data), 2)

    def test_unknown_row_and_missing_callbacks(self):
        table = build_admin_table(EntityStore(_entities(3)), "Manage")
        self.assertEqual(apply_admin_command(table, "d nope", lambda t, b: True), UNKNOWN)
        self.assertEqual(apply_admin_command(table, "e acc-0", lambda t, b: True), UNKNOWN)
        self.assertEqual(apply_admin_command(table, "a", lambda t, b: True), UNKNOWN)

    def test_search_and_paging(self):
        table = build_admin_table(EntityStore(_entities(25)), "Manage")
        apply_admin_command(table, "g 3", lambda t, b: False)
        self.assertEqual(table.page, 3)
        apply_admin_command(table, "/hub 2", lambda t, b: False)
        self.assertEqual(table.page, 1)
        self.assertEqual(len(table.filtered()), 6)


class MainTests(unittest.TestCase):
    def _run(self, *argv: str) -> dict:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main(list(argv))
        self.assertEqual(code, 0)
        return json.loads(buffer.getvalue())

    def test_json_listing(self):
        payload = self._run("--profile", "accelerators", "--filter", "Algiers", "--json")
        view = payload["view"]
        self.assertEqual(payload["profile"], "accelerators")
        self.assertTrue(view["items"])
        self.assertTrue(all(item["city"] == "Algiers" for item in view["items"]))
        years = [item["founded_year"] for item in view["items"]]
        self.assertEqual(years, sorted(years, reverse=True))

    def test_json_admin(self):
        payload = self._run("--profile", "admin", "--json")
        self.assertEqual(payload["table"]["headers"], ["Name", "City", "Founded", "Actions"])
        self.assertEqual(payload["table"]["rows"][0]["cells"][3], ["delete"])

    def test_explicit_page_is_clamped(self):
        listing = self._run("--profile", "accelerators", "--page", "0", "--json")
        self.assertEqual(listing["view"]["current_page"], 1)
        listing = self._run("--profile", "accelerators", "--page", "99", "--json")
        self.assertEqual(listing["view"]["current_page"], listing["view"]["total_pages"])
        admin = self._run("--profile", "admin", "--page", "-4", "--json")
        self.assertEqual(admin["table"]["page"], 1)
        admin = self._run("--profile", "admin", "--page", "99", "--json")
        self.assertEqual(admin["table"]["page"], admin["table"]["total_pages"])

    def test_admin_rejects_filter_and_sort(self):
        for flags in (["--filter", "Algiers"], ["--sort", "asc"]):
            stderr = io.StringIO()
            with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
                self.assertEqual(main(["--profile", "admin", "--json", *flags]), 2)
            self.assertIn(flags[0], stderr.getvalue())

    def test_unknown_profile_exit_code(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(main(["--profile", "nope"]), 2)


if __name__ == "__main__":
    unittest.main()
