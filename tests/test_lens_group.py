import math

import pytest

from arclens.errors import ConfigurationError
from arclens.lens import create_interactive_lens
from arclens.lens_group import create_lens_group
from arclens.proximity import ProximityGroupOptions
from arclens.registry import PROXIMITY_REGISTRY, SNAP_REGISTRY
from arclens.snap import SnapGroupOptions


def test_lens_group_combines_snapping_and_arc_sharing(reactive):
    a = create_interactive_lens((0, 0), radius=60, reactive=reactive)
    b = create_interactive_lens((300, 0), radius=40, reactive=reactive)

    group = create_lens_group(
        [a, b],
        ProximityGroupOptions(arc_layout="equal", animation_duration=0),
        SnapGroupOptions(snap_distance=50, unsnap_distance=75),
        reactive=reactive,
    )
    assert len(group.proximity_group.clusters()) == 2

    b.handle.move_to(30, 0)

    assert group.snap_group.is_snapped(a, b)
    assert a.location.as_tuple() == b.location.as_tuple()
    assert len(group.proximity_group.clusters()) == 1
    assert a.radial_span.value == pytest.approx(math.pi * 0.99)


def test_failed_snap_group_disposes_the_proximity_group(reactive):
    a = create_interactive_lens((0, 0), reactive=reactive)

    with pytest.raises(ConfigurationError):
        create_lens_group(
            [a],
            ProximityGroupOptions(arc_layout="equal", animation_duration=0),
            SnapGroupOptions(snap_distance=50, unsnap_distance=10),
            reactive=reactive,
        )

    assert a not in PROXIMITY_REGISTRY
    assert a not in SNAP_REGISTRY


def test_dispose_releases_both_registries(reactive):
    a = create_interactive_lens((0, 0), reactive=reactive)
    group = create_lens_group(
        [a], ProximityGroupOptions(arc_layout="equal", animation_duration=0), reactive=reactive
    )

    group.dispose()

    assert a not in PROXIMITY_REGISTRY
    assert a not in SNAP_REGISTRY
