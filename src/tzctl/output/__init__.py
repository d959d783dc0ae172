"""Output layer — human (Rich), quiet, and JSON rendering of ServiceResult."""
