"""open-on-github: open files from a Git checkout on their web host."""

__version__ = "0.1.0"
