"""Cat Road: a small pygame arcade game where a kitten gathers collectibles."""

__version__ = "0.1.0"