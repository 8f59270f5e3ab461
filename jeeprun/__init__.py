"""Top-down arcade game: drive a jeep and guard the weaklings on their way to the boat."""

__version__ = "0.1.0"