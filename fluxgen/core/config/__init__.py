"""Configuration loading — fluxgen.yml into a GeneratorConfig."""
