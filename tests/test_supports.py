"""Support column layout tests."""
import pytest

from balcony.core.errors import InvalidSupportCount
from balcony.models import ElementRole
from balcony.rules.support.columns import SupportColumnRule, support_positions


def _xz(points):
    return [(p.x, p.z) for p in points]


class TestSupportPositions:

    def test_two_supports_front_corners(self):
        pts = support_positions(3.0, 1.5, 2, 0.1)
        assert _xz(pts) == pytest.approx([(-1.45, 0.7), (1.45, 0.7)])

    def test_three_supports_add_centre(self):
        pts = support_positions(3.0, 1.5, 3, 0.1)
        assert _xz(pts) == pytest.approx([(-1.45, 0.7), (0.0, 0.7), (1.45, 0.7)])

    def test_four_supports_split_rows(self):
        """Front row then back row, each left to right."""
        pts = support_positions(4.0, 2.0, 4, 0.1)
        assert _xz(pts) == pytest.approx([
            (-1.95, 0.95), (1.95, 0.95), (-1.95, -0.95), (1.95, -0.95),
        ])

    def test_six_supports_two_rows_of_three(self):
        pts = support_positions(4.0, 2.0, 6, 0.1)
        assert _xz(pts) == pytest.approx([
            (-1.95, 0.95), (0.0, 0.95), (1.95, 0.95),
            (-1.95, -0.95), (0.0, -0.95), (1.95, -0.95),
        ])

    def test_rows_mirror_each_other(self):
        pts = support_positions(5.0, 2.4, 6, 0.1)
        front, back = pts[:3], pts[3:]
        for f, b in zip(front, back):
            assert f.x == b.x
            assert f.z == -b.z

    @pytest.mark.parametrize("count", [0, 1, 5, 7, -2, True])
    def test_rejects_illegal_counts(self, count):
        with pytest.raises(InvalidSupportCount):
            support_positions(3.0, 1.5, count, 0.1)


class TestSupportColumnRule:

    def test_columns_span_ground_to_platform(self, make_context):
        ctx = make_context(platform_height=2.5, support_count=4)
        columns = SupportColumnRule().generate(ctx)
        assert len(columns) == 4
        for col in columns:
            assert col.role == ElementRole.SUPPORT
            assert col.position.y == pytest.approx(1.25)
            assert col.extents.height == pytest.approx(2.5)
            assert col.extents.width == col.extents.depth == pytest.approx(0.1)

    def test_outer_face_flush_with_edges(self, make_context):
        ctx = make_context(width=3.0, depth=1.5, support_count=4)
        for col in SupportColumnRule().generate(ctx):
            assert abs(col.position.x) + col.extents.width / 2 == pytest.approx(1.5)
            assert abs(col.position.z) + col.extents.depth / 2 == pytest.approx(0.75)

    def test_row_tags(self, make_context):
        ctx = make_context(support_count=6)
        rows = [c.tags["row"] for c in SupportColumnRule().generate(ctx)]
        assert rows == ["front"] * 3 + ["back"] * 3
