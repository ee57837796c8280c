# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers around core/.
#
# Each tool:
#   1. Resolves names (location, activity, crop) to core objects
#   2. Calls a pure function from core/
#   3. Converts dataclasses to dicts for JSON
#   4. Reports unknown names as an error dict with the valid choices
#
# Tools contain no business logic and make no decisions of their own.
# =============================================================================
