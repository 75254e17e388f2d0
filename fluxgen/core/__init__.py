"""Core — configuration, path/classpath resolution, command composition, policy."""
