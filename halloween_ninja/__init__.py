"""Game logic for a side-scrolling Halloween ninja platformer: checks, randomness, sliders, layout, sound effects, states and graph layout."""

__version__ = "0.1.0"