"""
Routes package for the Rooming List Management application.

This package contains route blueprints:
- api: JSON endpoints consumed by the events view
- views: HTML page routes for the web interface
"""
