"""Sequential versus threaded benchmark of file copy, cipher and SHA-256 jobs."""

__version__ = "0.1.0"