"""
API Module
---------
Provides RESTful API endpoints for the geocoding service using FastAPI.
Features include:
- Reverse geocoding coordinates into administrative addresses
- Forward geocoding free-text addresses into candidate locations
- Listing districts and their sectors
"""
