"""qed_ssg.adapters - SSG toolchain adapters and their catalogue."""

from qed_ssg.adapters.base import Adapter, AdapterSpec
from qed_ssg.adapters.catalog import CATALOG, catalog_by_name
from qed_ssg.adapters.schema import parse_adapter_dict, parse_adapter_yaml

__all__ = [
    "Adapter",
    "AdapterSpec",
    "CATALOG",
    "catalog_by_name",
    "parse_adapter_dict",
    "parse_adapter_yaml",
]
