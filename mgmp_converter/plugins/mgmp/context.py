"""
MGMP Conversion Context

Per-conversion state passed to every mapping step. A fresh context is created
for each record, so running counters never leak from one conversion into the
next.
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass, field

from .constants import GML_ID_PREFIX


def generate_gml_id() -> str:
    """Random gml:id of the form ``GMLID_<uuid4>``."""
    return f"{GML_ID_PREFIX}{uuid.uuid4()}"


@dataclass
class ConversionContext:
    """
    Running element indices for one conversion.

    Steps advance these counters to place successive repeatable elements
    (geographic elements, citation dates, citation identifiers, resource
    constraints) at consecutive positions.
    """

    geographic_element_index: int = 1
    date_element_index: int = 1
    data_identification_index: int = 1
    resource_constraints_index: int = 1

    # Supplies gml:id values; replaced in tests for deterministic output
    gml_id_supplier: Callable[[], str] = field(default=generate_gml_id)

    def next_gml_id(self) -> str:
        return self.gml_id_supplier()
