"""Chess board for two players at one window or in two processes linked by POSIX signals."""

__version__ = "0.1.0"