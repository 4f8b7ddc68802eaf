"""
Labeling Engine

Path classification, mass-change detection, review checks and
label reconciliation.
"""

from .classifier import PathClassifier, PathRule, build_rules, classify
from .mass_changes import MassChangeThresholds, detect_mass_change
from .review import check_review_needed
from .reconciler import REMOVABLE_LABELS, apply_plan, reconcile

__all__ = [
    'PathClassifier',
    'PathRule',
    'build_rules',
    'classify',
    'MassChangeThresholds',
    'detect_mass_change',
    'check_review_needed',
    'REMOVABLE_LABELS',
    'apply_plan',
    'reconcile',
]
