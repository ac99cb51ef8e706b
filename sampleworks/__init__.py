"""Small worked examples: helpers, shapes, a user API, a record log, a URL checker, form validation and a Pac-Man model."""

__version__ = "0.1.0"