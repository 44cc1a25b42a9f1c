"""
subtag_registry — IANA Language Subtag Registry converter.

Fetches the registry's record-jar text (or reads a local cache),
parses it into typed records, and renders the result as YAML.

Built on the Railway-Oriented Programming (ROP) framework for
explicit, composable, functional error handling.
"""

__version__ = "0.1.0"
