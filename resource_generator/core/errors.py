"""Error types raised while loading resources and generating code."""


class ResourceParsingError(Exception):
    """
    A single resource could not be parsed.

    Recoverable: the loader reports the description as a warning and skips
    the resource, generation continues for everything else.
    """

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)

    def __str__(self):
        return self.description


class GenerationError(Exception):
    """Generation is impossible, no output must be written."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)

    def __str__(self):
        return self.description
