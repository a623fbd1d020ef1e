import argparse
import json
import logging
from typing import Dict, List, Optional, Sequence

from arclens import (
    ARC_LAYOUTS,
    ConfigurationError,
    Lens,
    MembershipRegistry,
    ProximityGroupOptions,
    Reactive,
    create_lens,
    create_proximity_group,
    get_defaults,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_lenses(path: str) -> List[Lens]:
    with open(path, encoding="utf-8") as fin:
        scene = json.load(fin)

    entries = scene["lenses"]
    if not isinstance(entries, list):
        raise ValueError("'lenses' must be a list")

    lenses: List[Lens] = []
    for idx, entry in enumerate(entries):
        kwargs: Dict[str, float] = {}
        for key in ("radius", "radial_span", "size"):
            if key in entry:
                kwargs[key] = float(entry[key])
        lenses.append(
            create_lens(
                (float(entry["x"]), float(entry["y"])),
                name=str(entry.get("name", f"lens{idx}")),
                **kwargs,
            )
        )
    return lenses


def _format_cluster(index: int, lenses: Sequence[Lens]) -> str:
    parts = [
        f"{lens.name} span={lens.radial_span.value:.6f} anchor={lens.anchor_angle.value:.6f}"
        for lens in lenses
    ]
    return f"cluster {index}: " + "; ".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> None:
    defaults = get_defaults()
    parser = argparse.ArgumentParser(description="Cluster lenses and lay out their shared arcs")
    parser.add_argument("path", help="Path to a JSON scene with a 'lenses' list")
    parser.add_argument(
        "--threshold",
        type=float,
        default=defaults.threshold,
        help=f"Clustering distance (default: {defaults.threshold:g})",
    )
    parser.add_argument(
        "--arc-gap",
        type=float,
        default=defaults.arc_gap,
        help=f"Gap between arcs as a fraction of a full turn (default: {defaults.arc_gap:g})",
    )
    parser.add_argument(
        "--layout",
        choices=sorted(ARC_LAYOUTS),
        default="equal",
        help="Arc layout policy (default: equal)",
    )
    parser.add_argument(
        "--inactive",
        action="store_true",
        help="Evaluate with proximity sharing switched off",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading scene from %s", args.path)
    try:
        lenses = _load_lenses(args.path)
    except (OSError, KeyError, TypeError, ValueError) as exc:
        logger.error("Could not read scene %s: %s", args.path, exc)
        raise SystemExit(2) from exc

    options = ProximityGroupOptions(
        arc_layout=args.layout,
        threshold=args.threshold,
        arc_gap=args.arc_gap,
        animation_duration=0,
        active=not args.inactive,
    )
    try:
        group = create_proximity_group(
            lenses,
            options,
            reactive=Reactive(),
            registry=MembershipRegistry("proximity"),
        )
    except ConfigurationError as exc:
        logger.error("Invalid options: %s", exc)
        raise SystemExit(2) from exc

    clusters = group.clusters()
    logger.info("Found %d cluster(s) among %d lens(es)", len(clusters), len(lenses))
    for idx, cluster in enumerate(clusters):
        print(_format_cluster(idx, cluster))
    group.dispose()


if __name__ == "__main__":
    main()
