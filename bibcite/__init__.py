"""Citation rendering for Markdown documents.

Rewrites ``@key`` citation markers into author-year or numbered citations
and splices a formatted reference list into the documents.
"""

__version__ = "0.4.0"
