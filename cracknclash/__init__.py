"""Race a computer opponent to crack a secret code of digits 0-5 in the terminal."""

__version__ = "0.1.0"