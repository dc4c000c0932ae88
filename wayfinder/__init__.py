"""Top-level package for the College Wayfinder project.

This package serves room metadata and the building's navigation graph
over HTTP, renders floor plans and computes shortest walking routes
between rooms, doors, stairs and entrances.
"""
