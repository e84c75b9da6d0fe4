"""Solutions to Project Euler problems 1 to 32, one module per problem, with a timing command."""

__version__ = "0.1.0"