"""Per-file signal record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileSignal:
    """Structural facts extracted from a single source file.

    Attributes:
        path: Path of the file as it was handed to the extractor (posix form)
        is_component_like: File contains a component-style function returning markup
        uses_state_hooks: File calls state or effect hooks
        is_typed_source: File extension denotes a statically typed source
        uses_utility_styling: Class attributes carry utility class-name prefixes
        is_test_file: Path contains a ``.test.`` or ``.spec.`` segment
    """

    path: str
    is_component_like: bool = False
    uses_state_hooks: bool = False
    is_typed_source: bool = False
    uses_utility_styling: bool = False
    is_test_file: bool = False
