"""Fleet machinery database: machine records, storage, login and a console menu."""

__version__ = "0.1.0"
__all__ = ["models", "database", "auth", "cli"]