"""Per-screen render and input handlers."""
