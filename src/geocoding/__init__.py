"""
Geocoding Module
--------------
Resolves coordinates into Rwandan administrative addresses (province, district, sector, cell, village, road).
Uses OpenStreetMap's Nominatim API at several zoom levels and reconciles the answers with confidence grading.
"""
