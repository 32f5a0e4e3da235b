"""
Test cases for the flux-differencing DG / FR solver.

Run tests with pytest:
    pytest dgflux/tests/ -v

Or run individual test files:
    pytest dgflux/tests/test_reference_element.py -v
    pytest dgflux/tests/test_advection.py -v
"""
