"""
Core package for the executive orders explorer.

Submodules provide data loading, normalization, joining, filtering and
pagination, plus the Streamlit user interface orchestrated by the
top-level `app.py`.
"""
