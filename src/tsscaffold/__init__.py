"""tsscaffold - Typescript service scaffolding."""

__version__ = "0.1.0"
