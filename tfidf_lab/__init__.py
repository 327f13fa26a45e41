"""TF-IDF Lab - index HTML documents and rank them against free-text queries"""

__version__ = "0.1.0"
