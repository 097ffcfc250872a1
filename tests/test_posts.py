"""Railing post layout tests."""
import pytest

from balcony.models import EdgeId, ElementRole
from balcony.rules.railing.posts import RailingPostRule, post_count, post_positions


class TestPostCount:

    @pytest.mark.parametrize("length,expected", [
        (3.0, 5),    # ceil(3.75) + 1
        (1.5, 3),
        (1.0, 3),
        (0.8, 2),    # exactly one spacing: corners only
        (0.5, 2),
        (1.6, 3),    # exact multiple is not rounded up by float noise
        (6.0, 9),
    ])
    def test_counts(self, length, expected):
        assert post_count(length, 0.8) == expected


class TestPostPositions:

    def test_front_posts_evenly_spaced(self):
        posts = post_positions(3.0, 1.5)
        front = [p for e, p in posts if e == EdgeId.FRONT]
        assert [p.x for p in front] == pytest.approx([-1.5, -0.75, 0.0, 0.75, 1.5])
        assert all(p.z == 0.75 for p in front)

    def test_front_corners_always_present(self):
        for width in (1.0, 2.3, 3.7, 6.0):
            front = [p for e, p in post_positions(width, 1.2) if e == EdgeId.FRONT]
            assert front[0].x == pytest.approx(-width / 2)
            assert front[-1].x == pytest.approx(width / 2)

    def test_sides_only_get_interior_posts(self):
        posts = post_positions(3.0, 1.5)
        left = [p for e, p in posts if e == EdgeId.LEFT]
        right = [p for e, p in posts if e == EdgeId.RIGHT]
        assert [(p.x, p.z) for p in left] == pytest.approx([(-1.5, 0.0)])
        assert [(p.x, p.z) for p in right] == pytest.approx([(1.5, 0.0)])

    def test_no_post_placed_twice(self):
        posts = post_positions(4.0, 3.0)
        keys = {(round(p.x, 9), round(p.z, 9)) for _, p in posts}
        assert len(keys) == len(posts)

    def test_minimum_depth_has_no_side_posts(self):
        posts = post_positions(3.0, 0.8)
        assert [e for e, _ in posts] == [EdgeId.FRONT] * 5

    def test_order_front_left_right(self):
        edges = [e for e, _ in post_positions(3.0, 3.0)]
        assert edges == [EdgeId.FRONT] * 5 + [EdgeId.LEFT] * 3 + [EdgeId.RIGHT] * 3

    def test_spacing_never_exceeds_target(self):
        for width in (1.1, 2.45, 3.3, 5.9):
            front = [p for e, p in post_positions(width, 1.5) if e == EdgeId.FRONT]
            gaps = [b.x - a.x for a, b in zip(front, front[1:])]
            assert max(gaps) <= 0.8 + 1e-9


class TestRailingPostRule:

    def test_posts_span_the_railing(self, make_context):
        ctx = make_context(platform_height=2.5, railing_height=1.1)
        posts = RailingPostRule().generate(ctx)
        assert len(posts) == 7
        for post in posts:
            assert post.role == ElementRole.POST
            assert post.extents.length == pytest.approx(1.1)
            assert post.position.y - post.extents.length / 2 == pytest.approx(2.5)
            assert post.position.y + post.extents.length / 2 == pytest.approx(3.6)
            assert post.extents.radius == pytest.approx(0.03)

    def test_edge_tags(self, make_context):
        posts = RailingPostRule().generate(make_context(width=3.0, depth=1.5))
        assert [p.edge for p in posts] == ["front"] * 5 + ["left", "right"]

    def test_posts_are_upright(self, make_context):
        for post in RailingPostRule().generate(make_context()):
            assert (post.rotation.x, post.rotation.y, post.rotation.z) == (0.0, 0.0, 0.0)
