"""Runner-facing pieces: toolkit collaborators, invocation context, step runner."""
