"""Core (UI-agnostic) GVP dashboard logic.

This package contains:
- taxonomy tables and the keyword classifier
- category aggregation into percentage distributions
- data loading (JSON -> records) and ward filtering
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
