"""
Test suite for the Todo List end-to-end suite.

This package contains:
- unit/: Browser-free tests of the suite's own code, using unittest.mock
- ui/: Browser tests of primitives and assertions against local fixture pages
- e2e/: The Todo List scenarios against the hosted app
"""
