"""fluxgen — build-time invoker for the Fluxtion code generator."""

__version__ = "0.1.0"
