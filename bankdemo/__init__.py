"""In-memory bank account simulation and array scanning exercises."""
