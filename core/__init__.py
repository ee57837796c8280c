# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the agri-weather advisor:
# suitability scoring, agronomy heuristics, catalogs and mock forecasts.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any transport.  Every module
#   here is pure Python and works in a bare REPL with no network access.
#   The tools/ layer is the wiring; core/ is the engine.
# =============================================================================
