"""
Reference Data Module
-------------
Static administrative reference data used as ground truth by the extractors.
Holds the closed district set, the district to province table, the sector lists
and the locale naming rules, wrapped in a CountryProfile per country.
"""
