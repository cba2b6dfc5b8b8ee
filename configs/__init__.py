"""Environment-driven configuration for the assistant relay."""
