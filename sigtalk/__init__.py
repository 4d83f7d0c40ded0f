"""Send text between local processes one bit at a time using SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"
__all__ = ["bits", "client", "numbers", "server", "textops"]