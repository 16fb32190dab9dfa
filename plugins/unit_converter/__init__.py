"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Table-driven conversions across fourteen quantity families with YAML-defined custom units.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
    "api": "/api/unit_converter",
}


__all__ = ["manifest"]
