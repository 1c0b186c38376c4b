"""Infrastructure Layer — logging setup, the only module touching process-wide handlers."""
