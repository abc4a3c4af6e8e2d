"""SpaceConfig: tunables shared by the geometry engine and the analyzer."""

from __future__ import annotations

import param


class SpaceConfig(param.Parameterized):
    """Numeric thresholds for space analysis.

    A module-level ``settings`` instance is the process default. Analyzers
    and notifiers accept their own instance so tests and hosts can tune
    thresholds without touching global state. The free RectOps predicates
    (``touches_side_approximately`` and friends) always read ``settings``.
    """

    insignificant_area = param.Number(
        default=4.0, bounds=(0, None),
        doc="Fragments and elements at or below this area (square units) are ignored.",
    )
    rel_tol = param.Number(
        default=1e-6, bounds=(0, None),
        doc="Relative tolerance for approximate boundary comparisons.",
    )
    abs_tol = param.Number(
        default=1e-9, bounds=(0, None),
        doc="Absolute tolerance floor for comparisons against zero.",
    )


settings = SpaceConfig()
