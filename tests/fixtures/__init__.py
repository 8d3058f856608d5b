"""Test fixture package for the address lookup service.

Contains fixtures for:
- Fake upstream geocoding/boundaries responses
- FastAPI application and async HTTP client
"""
