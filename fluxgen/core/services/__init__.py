"""Services — the stages of a single generator invocation."""
