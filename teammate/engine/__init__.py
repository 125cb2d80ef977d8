"""Team formation engine.

Sub-modules:
- fit_scoring   – candidate ↔ team fit components and weighted score
- team_builder  – feasibility checks, leader seeding, greedy filling
- team_balance  – per-team statistics & cross-team skill spread
"""
