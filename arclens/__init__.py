from .reactive import Bool, Cell, Item, Point, Reactive, Real, Rule, attach_point, get_default_reactive
from .animate import (
    Animator,
    EASINGS,
    ease_in_out_cubic,
    ease_out_back,
    ease_out_cubic,
    ease_out_sine,
    get_default_animator,
    linear,
)
from .errors import ArcLensError, ConfigurationError, MembershipError, ReactiveCycleError
from .config import CoordinationDefaults, get_defaults, set_defaults
from .geometry import dist, pairwise_distances
from .lens import Box, DropBox, InteractiveLens, Lens, create_drop_box, create_interactive_lens, create_lens
from .components import are_identical, connected_components
from . import layouts as arc_layouts
from .layouts import ARC_LAYOUTS, ArcAssignment, ArcLayout, equal, get_arc_layout, preserve, weighted
from .registry import MembershipRegistry, PROXIMITY_REGISTRY, SNAP_REGISTRY
from .proximity import ProximityGroup, ProximityGroupOptions, create_proximity_group
from .snap import SnapGroup, SnapGroupOptions, SnapState, create_snap_group
from .lens_group import LensGroup, create_lens_group

__all__ = [
    'ARC_LAYOUTS',
    'Animator',
    'ArcAssignment',
    'ArcLayout',
    'ArcLensError',
    'Bool',
    'Box',
    'Cell',
    'ConfigurationError',
    'CoordinationDefaults',
    'DropBox',
    'EASINGS',
    'InteractiveLens',
    'Item',
    'Lens',
    'LensGroup',
    'MembershipError',
    'MembershipRegistry',
    'PROXIMITY_REGISTRY',
    'Point',
    'ProximityGroup',
    'ProximityGroupOptions',
    'Reactive',
    'ReactiveCycleError',
    'Real',
    'Rule',
    'SNAP_REGISTRY',
    'SnapGroup',
    'SnapGroupOptions',
    'SnapState',
    'arc_layouts',
    'are_identical',
    'attach_point',
    'connected_components',
    'create_drop_box',
    'create_interactive_lens',
    'create_lens',
    'create_lens_group',
    'create_proximity_group',
    'create_snap_group',
    'dist',
    'ease_in_out_cubic',
    'ease_out_back',
    'ease_out_cubic',
    'ease_out_sine',
    'equal',
    'get_arc_layout',
    'get_default_animator',
    'get_default_reactive',
    'get_defaults',
    'linear',
    'pairwise_distances',
    'preserve',
    'set_defaults',
    'weighted',
]
