"""Testing helpers – in-memory doubles for the service's ports."""
