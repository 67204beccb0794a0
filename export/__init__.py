"""Export module for JSON reports."""
from export.json_exporter import export_json, result_to_dict

__all__ = ["export_json", "result_to_dict"]
