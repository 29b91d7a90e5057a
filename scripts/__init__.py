"""Developer entry points for running the suite."""
