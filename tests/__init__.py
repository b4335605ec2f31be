"""Test suite for the issue-forms package.

This package contains unit and integration tests validating the
element models, cross-element rules, error reporting, YAML parsing
and command-line utilities.
"""
