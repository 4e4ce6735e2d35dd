"""Exception hierarchy for the colour tracker."""

from __future__ import annotations

from collections.abc import Sequence


class ProcessorError(Exception):
    """Base class for every error raised while processing frames."""


class ChannelSelectError(ProcessorError):
    """Raised when a colour bitmap does not select one or two channels."""

    def __init__(self, selected_indices: Sequence[int], selected_bits: Sequence[bool]) -> None:
        self.selected_indices = list(selected_indices)
        self.selected_bits = [bool(bit) for bit in selected_bits]
        bits = ", ".join("true" if bit else "false" for bit in self.selected_bits)
        super().__init__(
            "Error when selecting channels:\n"
            f"\tSelected Indices: {self.selected_indices}\n"
            f"\tInput: [{bits}] [Size: {len(self.selected_bits)}]"
        )


class PathError(ProcessorError):
    """Raised when a source or destination path cannot be worked out."""

    def __init__(self, path_name: str) -> None:
        self.path_name = path_name
        super().__init__(f'Could not create path: ["{path_name}"]')


class EnumToIndexError(ProcessorError):
    """Raised when an index does not name a colour."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Could not convert index to colour [{index}]")


class IndexToEnumError(ProcessorError):
    """Raised when a colour has no index in the colour table."""

    def __init__(self, colour: object) -> None:
        self.colour = colour
        name = getattr(colour, "name", colour)
        super().__init__(f"Could not convert colour to index [{name}]")


class SymmetricPairError(ProcessorError):
    """Raised when a colour index has no symmetric partner."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Could not find symmetric pair: {index}")


class VideoError(ProcessorError):
    """Raised when a video cannot be read or written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)