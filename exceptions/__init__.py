"""Exception types shared across the relay."""
