"""ÑamCol recipe tracker backend."""
