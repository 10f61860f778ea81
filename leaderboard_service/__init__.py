"""
Leaderboard Service - score records for game runs

Responsibilities:
- Store completed-run scores (player, score, level)
- Ranked listing with pagination
- Top-N and per-player views
- Removal of individual entries
"""
