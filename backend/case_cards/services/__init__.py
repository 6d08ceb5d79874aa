# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import case_card_composer
from . import component_merger
from . import override_applier
from . import section_classifier

__all__ = [
    "case_card_composer",
    "component_merger",
    "override_applier",
    "section_classifier",
]
