"""Click plumbing for the numview command: base class and shared context."""
