"""Validation module for the Movies API.

Request-level checks that turn malformed input into 400 responses before
any query runs, most importantly the ObjectId format check applied to every
identifier taken from a request path.
"""
