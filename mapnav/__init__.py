"""Map navigation backend: geocode two addresses, fetch a walking route, render it."""

__version__ = "0.1.0"
