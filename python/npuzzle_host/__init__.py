"""Terminal host for the npuzzle engine."""
