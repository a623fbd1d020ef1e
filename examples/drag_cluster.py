"""Example: drag lenses together and watch them share the circle."""

import logging

from arclens import (
    Animator,
    ProximityGroupOptions,
    SnapGroupOptions,
    create_interactive_lens,
    create_lens_group,
)


def _describe(lenses) -> None:
    for lens in lenses:
        print(
            f"  {lens.name}: at ({lens.location.x:.0f}, {lens.location.y:.0f}) "
            f"span={lens.radial_span.value:.3f} anchor={lens.anchor_angle.value:.3f}"
        )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    animator = Animator()
    lenses = [
        create_interactive_lens((100, 100), radius=60, name="education"),
        create_interactive_lens((400, 100), radius=40, name="income"),
        create_interactive_lens((700, 100), radius=50, name="health"),
    ]
    group = create_lens_group(
        lenses,
        ProximityGroupOptions(arc_layout="equal", threshold=100, arc_gap=0.02, animation_duration=400),
        SnapGroupOptions(snap_distance=50, unsnap_distance=75),
        animator=animator,
    )
    animator.finish_all()
    print("Initial layout:")
    _describe(lenses)

    # drag "income" next to "education"
    lenses[1].handle.move_to(180, 120)
    for _ in range(8):
        animator.tick(50)
    print("After dragging income close to education:")
    _describe(lenses)

    # drop "health" right on top of "income"; the snap group merges them
    lenses[2].handle.move_to(200, 110)
    animator.finish_all()
    print("After dropping health onto income:")
    _describe(lenses)
    print(f"  snapped partners of health: {sorted(partner.name for partner in group.snap_group.partners(lenses[2]))}")

    group.proximity_group.active.value = False
    animator.finish_all()
    print("Proximity sharing switched off:")
    _describe(lenses)


if __name__ == "__main__":
    main()
