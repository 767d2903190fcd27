"""Move selection: static evaluation, alpha-beta search, and player agents."""
