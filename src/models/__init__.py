"""
Data Models Module
----------------
Contains Pydantic models for provider responses and resolved addresses.
Also holds the country profile that carries the reference data and naming rules.
"""
