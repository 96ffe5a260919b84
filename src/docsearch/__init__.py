"""docsearch - chunk, embed and search free text over Qdrant."""

__version__ = "0.1.0"
