"""Read and edit RFD documents in AsciiDoc and Markdown, and render RFD templates."""

__version__ = "0.1.0"