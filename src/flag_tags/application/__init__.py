"""Application – tag resolution, flag trackers and diagnostics."""
