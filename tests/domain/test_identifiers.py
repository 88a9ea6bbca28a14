"""Unit tests for id and timestamp generation."""

import re

from catalog_admin.domain.service.identifiers import generate_id, unique_id, utc_now


class TestGenerateId:

    def test_ids_are_hex_strings(self):
        assert re.fullmatch(r"[0-9a-f]{12}", generate_id())

    def test_ids_do_not_repeat(self):
        ids = {generate_id() for _ in range(2000)}
        assert len(ids) == 2000


class TestUniqueId:

    def test_redraws_on_collision(self):
        draws = iter(["a", "b", "c"])
        assert unique_id({"a", "b"}, lambda: next(draws)) == "c"

    def test_first_draw_used_when_free(self):
        assert unique_id(set(), lambda: "x") == "x"


class TestUtcNow:

    def test_iso_format_with_z_suffix(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now())

    def test_sorts_chronologically(self):
        first = utc_now()
        second = utc_now()
        assert first <= second
