"""Composition example: a computer, its power supply, and installed games.

The domain classes are kept free of FastAPI concerns so they can be used from the API, a REPL, and tests.
"""
