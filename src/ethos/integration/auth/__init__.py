"""Token models and resolution."""
