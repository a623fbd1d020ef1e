import math

import pytest

from arclens.errors import ConfigurationError
from arclens.layouts import ARC_LAYOUTS, equal, get_arc_layout, preserve, weighted
from arclens.lens import create_lens


def _lenses(count, radius=100.0, radial_span=math.pi):
    return [create_lens((i * 10.0, 0.0), radius=radius, radial_span=radial_span) for i in range(count)]


def test_equal_two_lenses_with_ten_percent_gap():
    lenses = _lenses(2)

    first, second = equal(lenses, 0.1)

    assert first.lens is lenses[0] and second.lens is lenses[1]
    assert first.radial_span == pytest.approx(2.8274, abs=1e-4)
    assert first.anchor_angle == pytest.approx(0.0)
    assert second.radial_span == pytest.approx(2.8274, abs=1e-4)
    assert second.anchor_angle == pytest.approx(-3.1416, abs=1e-4)


@pytest.mark.parametrize("layout", [equal, weighted, preserve])
@pytest.mark.parametrize("gap", [0.0, 0.01, 0.3, 1.0, 1.5])
def test_single_lens_gets_upward_half_circle(layout, gap):
    (assignment,) = layout(_lenses(1), gap)

    assert assignment.radial_span == pytest.approx(math.pi)
    assert assignment.anchor_angle == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize("count", [2, 3, 5, 8])
@pytest.mark.parametrize("gap", [0.0, 0.01, 0.1, 0.5])
def test_equal_conserves_the_full_turn(count, gap):
    assignments = equal(_lenses(count), gap)

    gap_per_lens = 2 * math.pi * gap / count
    total = sum(a.radial_span + gap_per_lens for a in assignments)
    assert total == pytest.approx(2 * math.pi)
    assert len({round(a.radial_span, 12) for a in assignments}) == 1


def test_equal_anchors_follow_the_cursor():
    assignments = equal(_lenses(4), 0.0)

    for idx, assignment in enumerate(assignments):
        assert assignment.anchor_angle == pytest.approx(-idx * math.pi / 2)


def test_weighted_spans_follow_radius():
    lenses = [create_lens(radius=50.0), create_lens(radius=150.0)]

    small, large = weighted(lenses, 0.0)

    assert large.radial_span == pytest.approx(3 * small.radial_span)
    assert small.radial_span + large.radial_span == pytest.approx(2 * math.pi)
    assert large.anchor_angle == pytest.approx(-small.radial_span)


def test_weighted_with_zero_radii_falls_back_to_equal():
    lenses = [create_lens(radius=0.0), create_lens(radius=0.0)]

    spans = [a.radial_span for a in weighted(lenses, 0.1)]

    assert spans == pytest.approx([a.radial_span for a in equal(lenses, 0.1)])


def test_preserve_keeps_spans_that_fit():
    lenses = _lenses(3, radial_span=1.0)

    assignments = preserve(lenses, 0.1)

    assert [a.radial_span for a in assignments] == pytest.approx([1.0, 1.0, 1.0])
    gap_per_lens = 2 * math.pi * 0.1 / 3
    assert assignments[1].anchor_angle == pytest.approx(-(1.0 + gap_per_lens))


def test_preserve_scales_spans_that_do_not_fit():
    lenses = _lenses(2, radial_span=math.pi * 1.5)

    assignments = preserve(lenses, 0.0)

    assert sum(a.radial_span for a in assignments) == pytest.approx(2 * math.pi)


def test_empty_cluster_yields_no_assignments():
    assert equal([], 0.1) == []


@pytest.mark.parametrize("layout", [equal, weighted, preserve])
def test_first_anchor_is_positive_zero(layout):
    first = layout(_lenses(3), 0.1)[0]

    assert first.anchor_angle == 0.0
    assert math.copysign(1.0, first.anchor_angle) == 1.0


def test_get_arc_layout_resolves_names_and_callables():
    def custom(component, gap):
        return []

    assert get_arc_layout("equal") is ARC_LAYOUTS["equal"]
    assert get_arc_layout(custom) is custom
    with pytest.raises(ConfigurationError, match="unknown arc layout"):
        get_arc_layout("spiral")
