"""Example: compare the built-in arc layout policies on one cluster."""

from arclens import ARC_LAYOUTS, create_lens


def main() -> None:
    cluster = [
        create_lens((0, 0), radius=40, radial_span=1.0, name="small"),
        create_lens((30, 0), radius=80, radial_span=2.0, name="medium"),
        create_lens((60, 0), radius=120, radial_span=0.5, name="large"),
    ]
    for name, layout in sorted(ARC_LAYOUTS.items()):
        print(f"{name}:")
        for assignment in layout(cluster, 0.05):
            print(
                f"  {assignment.lens.name:>6}: span={assignment.radial_span:.3f} "
                f"anchor={assignment.anchor_angle:.3f}"
            )


if __name__ == "__main__":
    main()
