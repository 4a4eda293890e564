"""
API test package for the reference Rooming List application.

This package contains tests for the JSON endpoints the events view
consumes. Tests use the Flask test client and demonstrate:
- Listing and filtering
- Error handling testing
- Response shape validation
"""
