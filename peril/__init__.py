"""Game state, console text, log writing and RabbitMQ helpers for the Peril war game."""

__version__ = "0.1.0"