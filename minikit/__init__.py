"""Calculator, file encryptor, networking tools, thread pool and two pygame games."""

__version__ = "0.1.0"