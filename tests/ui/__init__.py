"""
Browser tests for the suite's primitives against local fixture pages.

A small Flask app serves static pages with exactly the situations the
primitives must handle: duplicate labels, elements that appear late,
class changes and an entry page linking to a landing page.
"""
