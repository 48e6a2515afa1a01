"""Step actions for the hello world action."""
