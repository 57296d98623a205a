import random

import pytest

from sciview.interface.state import ViewportController


def assert_invariant(viewport):
    assert 0 <= viewport.scroll_offset <= max(0, viewport.total_lines - viewport.page_size), (
        f"offset {viewport.scroll_offset} out of bounds for "
        f"{viewport.total_lines} lines, page {viewport.page_size}"
    )


class TestViewportController:
    """Scroll clamping of the content pane."""

    def test_scroll_down_stops_at_last_page(self):
        viewport = ViewportController(page_size=10, total_lines=25)
        for _ in range(100):
            viewport.scroll_down()
        assert viewport.scroll_offset == 15

    def test_scroll_up_stops_at_top(self):
        viewport = ViewportController(page_size=10, total_lines=25)
        assert not viewport.scroll_up(), "no change expected at the top"
        assert viewport.scroll_offset == 0

    def test_paging(self):
        viewport = ViewportController(page_size=10, total_lines=35)
        assert viewport.page_down()
        assert viewport.scroll_offset == 10
        viewport.page_down()
        viewport.page_down()
        assert viewport.scroll_offset == 25
        viewport.page_up()
        assert viewport.scroll_offset == 15

    def test_home_and_end(self):
        viewport = ViewportController(page_size=10, total_lines=35)
        viewport.end()
        assert viewport.scroll_offset == 25
        viewport.home()
        assert viewport.scroll_offset == 0

    def test_short_file_cannot_scroll(self):
        viewport = ViewportController(page_size=10, total_lines=4)
        assert not viewport.page_down()
        assert not viewport.end()
        assert viewport.scroll_offset == 0

    def test_shrinking_content_reclamps(self):
        viewport = ViewportController(page_size=10, total_lines=100)
        viewport.end()
        viewport.reload(30)
        assert viewport.scroll_offset == 20

    def test_load_resets_to_top(self):
        viewport = ViewportController(page_size=10, total_lines=100)
        viewport.end()
        viewport.load(100)
        assert viewport.scroll_offset == 0

    def test_growing_page_reclamps(self):
        viewport = ViewportController(page_size=10, total_lines=40)
        viewport.end()
        viewport.resize(35)
        assert viewport.scroll_offset == 5

    def test_visible_range(self):
        viewport = ViewportController(page_size=10, total_lines=14)
        viewport.end()
        assert list(viewport.state().visible_range) == list(range(4, 14))

    @pytest.mark.parametrize("seed", range(5))
    def test_invariant_under_random_commands(self, seed):
        rng = random.Random(seed)
        viewport = ViewportController(page_size=rng.randint(1, 30), total_lines=rng.randint(0, 200))
        commands = [
            viewport.scroll_up,
            viewport.scroll_down,
            viewport.page_up,
            viewport.page_down,
            viewport.home,
            viewport.end,
            lambda: viewport.reload(rng.randint(0, 200)),
            lambda: viewport.resize(rng.randint(0, 40)),
            lambda: viewport.scroll_by(rng.randint(-50, 50)),
        ]
        for _ in range(300):
            rng.choice(commands)()
            assert_invariant(viewport)
