"""Small building blocks: calculator, bookstore, credit card and custom types."""

__version__ = "0.1.0"

__all__ = ["bookstore", "calculator", "cli", "creditcard", "mytypes"]